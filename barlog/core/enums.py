"""Shared enums for models and API."""

from enum import Enum


class Unit(str, Enum):
    """Weight unit for plates, barbells and targets."""

    LB = "lb"
    KG = "kg"
