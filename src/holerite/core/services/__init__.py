"""Domain services for Holerite."""

from holerite.core.services.record_service import RecordService

__all__ = [
    "RecordService",
]
