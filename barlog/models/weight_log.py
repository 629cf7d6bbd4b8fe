"""WeightLog model — one logged lift: target weight, unit, bar and plates used."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Float, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from barlog.db.base import Base


class WeightLog(Base):
    """A single weight log entry.

    ``timestamp`` (ms since epoch) is the public identifier used for deletion.
    ``plate_description`` is the resolver's summary at the time of logging, kept
    verbatim even if the plate ladder changes later.
    """

    __tablename__ = "weight_logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True, index=True)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[str] = mapped_column(String(2), nullable=False)  # lb / kg
    barbell_id: Mapped[str] = mapped_column(String(16), nullable=False)
    plate_description: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
