from abc import ABC, abstractmethod
from typing import List

from src.service.room_booking.domain.entity.room_entity import Room


class IRoomQueryRepo(ABC):
    @abstractmethod
    async def list_all(self) -> List[Room]:
        """Every stored room, in store order"""
        pass
