from abc import ABC, abstractmethod

from src.service.room_booking.domain.domain_event.room_activity_event import RoomActivityEntry


class IActivityLogSink(ABC):
    """Append-only store for room activity entries"""

    @abstractmethod
    async def append(self, *, entry: RoomActivityEntry) -> None:
        """
        Raises:
            SinkError: When the entry could not be stored
        """
        pass
