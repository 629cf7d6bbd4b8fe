"""UserPreferences model — last used unit and bar, onboarding flag."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from barlog.db.base import Base


class UserPreferences(Base):
    """Singleton row (fixed id, no auth yet)."""

    __tablename__ = "user_preferences"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    unit: Mapped[str] = mapped_column(String(2), nullable=False, default="lb")
    barbell_id: Mapped[str] = mapped_column(String(16), nullable=False, default="1")
    saw_coach_mark: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
