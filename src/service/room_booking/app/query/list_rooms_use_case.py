from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.room_booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.room_booking.domain.entity.room_entity import Room


class ListRoomsUseCase:
    def __init__(self, room_query_repo: IRoomQueryRepo) -> None:
        self.room_query_repo = room_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        room_query_repo: IRoomQueryRepo = Depends(Provide[Container.room_query_repo]),
    ) -> Self:
        return cls(room_query_repo=room_query_repo)

    @Logger.io
    async def execute(self) -> List[Room]:
        """All rooms, unfiltered and unpaginated"""
        rooms = await self.room_query_repo.list_all()
        Logger.base.info(f'📋 [LIST_ROOMS] Found {len(rooms)} rooms')
        return rooms
