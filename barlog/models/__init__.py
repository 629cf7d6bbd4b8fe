"""ORM models - import all so Base.metadata is complete for migrations."""

from barlog.models.preferences import UserPreferences
from barlog.models.weight_log import WeightLog

__all__ = [
    "UserPreferences",
    "WeightLog",
]
