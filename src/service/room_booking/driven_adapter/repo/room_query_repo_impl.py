from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.room_booking.app.interface.i_room_query_repo import IRoomQueryRepo
from src.service.room_booking.domain.entity.room_entity import Room
from src.service.room_booking.driven_adapter.model.room_model import RoomModel
from src.service.room_booking.driven_adapter.repo.room_mapper import model_to_entity


class RoomQueryRepoImpl(IRoomQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_all(self) -> List[Room]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(RoomModel))
                return [model_to_entity(room_model) for room_model in result.scalars().all()]
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f'Failed to list rooms: {e}') from e
