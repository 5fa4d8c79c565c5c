"""
Room Command Repository Interface

Single-document reads and writes used by the reservation state machine.
"""

from abc import ABC, abstractmethod

from src.service.room_booking.domain.entity.room_entity import Room


class IRoomCommandRepo(ABC):
    @abstractmethod
    async def insert(self, *, room: Room) -> Room:
        """
        Persist a new room

        Raises:
            StorageError: When the insert fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, room_id: str) -> Room | None:
        """
        Get single room by ID

        Returns:
            Room entity or None if not found
        """
        pass

    @abstractmethod
    async def save(self, *, room: Room) -> Room:
        """
        Overwrite the stored room (last write wins)

        Raises:
            StorageError: When the write fails
        """
        pass
