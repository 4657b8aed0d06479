from enum import Enum


class EventStatus(Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls):
        return [status.value for status in cls]

    @classmethod
    def closed(cls):
        """Statuses that no longer accept registrations or transitions."""
        return [cls.COMPLETED.value, cls.CANCELLED.value]
