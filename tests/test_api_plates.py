"""Plate calculator and barbell reference endpoints."""

import pytest

API = "/api/v1"


class TestPlateCalculator:
    def test_default_bar_and_unit(self, client):
        response = client.get(f"{API}/plates/calculate", params={"target_weight": 242.5})
        assert response.status_code == 200
        data = response.json()
        assert data["unit"] == "lb"
        assert data["barbell_id"] == "1"
        assert data["bar_weight"] == 45
        assert data["per_side"] == 98.75
        assert data["plates"] == [
            {"weight": 45, "count": 2},
            {"weight": 5, "count": 1},
            {"weight": 2.5, "count": 1},
        ]
        assert data["description"] == "2 × 45 lb 🔘 1 × 5 lb 🔘 1 × 2.5 lb"
        assert data["total_weight"] == 240

    def test_kilogram_bar_by_id(self, client):
        response = client.get(
            f"{API}/plates/calculate",
            params={"target_weight": 100, "unit": "kg", "barbell_id": "2"},
        )
        data = response.json()
        assert data["bar_weight"] == 20
        assert [p["weight"] for p in data["plates"]] == [20.4, 15.9, 2.3, 1.13]
        assert data["total_weight"] == pytest.approx(99.46)

    def test_raw_bar_weight_is_matched_to_reference_bar(self, client):
        response = client.get(f"{API}/plates/calculate", params={"target_weight": 134, "bar_weight": 44})
        data = response.json()
        assert data["barbell_id"] == "2"
        assert data["description"] == "1 × 45 lb"

    def test_raw_bar_weight_without_match(self, client):
        response = client.get(f"{API}/plates/calculate", params={"target_weight": 100, "bar_weight": 50})
        data = response.json()
        assert data["barbell_id"] is None
        assert data["description"] == "1 × 25 lb"

    def test_unknown_barbell_falls_back_to_default(self, client):
        response = client.get(f"{API}/plates/calculate", params={"target_weight": 135, "barbell_id": "nope"})
        assert response.json()["barbell_id"] == "1"

    def test_target_below_bar(self, client):
        data = client.get(f"{API}/plates/calculate", params={"target_weight": 44}).json()
        assert data["plates"] == []
        assert data["per_side"] == 0
        assert data["description"] == "0 Plates"
        assert data["total_weight"] == 45

    def test_invalid_unit_is_rejected(self, client):
        response = client.get(f"{API}/plates/calculate", params={"target_weight": 135, "unit": "stone"})
        assert response.status_code == 422

    def test_target_above_max_weight_is_rejected(self, client):
        response = client.get(f"{API}/plates/calculate", params={"target_weight": 1e308})
        assert response.status_code == 422

    def test_denominations(self, client):
        data = client.get(f"{API}/plates/denominations", params={"unit": "lb"}).json()
        assert data == {"unit": "lb", "plates": [45, 35, 25, 15, 10, 5, 2.5]}


class TestBarbells:
    def test_list(self, client):
        data = client.get(f"{API}/barbells").json()
        assert len(data) == 9
        assert data[0]["id"] == "1"
        assert data[0]["label"] == "US Olympic Bar"

    def test_get_by_id(self, client):
        data = client.get(f"{API}/barbells/1").json()
        assert data["lbs"] == 45
        assert data["kg"] == 20.4

    def test_get_missing_returns_404(self, client):
        response = client.get(f"{API}/barbells/does-not-exist")
        assert response.status_code == 404

    def test_match_by_weight(self, client):
        response = client.get(f"{API}/barbells/match", params={"weight": 15.9, "unit": "kg"})
        assert response.status_code == 200
        assert response.json()["id"] == "3"

    def test_match_miss_returns_404(self, client):
        response = client.get(f"{API}/barbells/match", params={"weight": 100})
        assert response.status_code == 404
