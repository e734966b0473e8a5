"""Usage logging: per-device history of equipment use."""

from .log import UsageLog
from .models import UsageRecord

__all__ = ["UsageLog", "UsageRecord"]
