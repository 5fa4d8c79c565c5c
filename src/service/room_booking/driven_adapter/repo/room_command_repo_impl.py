from typing import AsyncContextManager, Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.room_booking.app.interface.i_room_command_repo import IRoomCommandRepo
from src.service.room_booking.domain.entity.room_entity import Room
from src.service.room_booking.driven_adapter.model.room_model import RoomModel
from src.service.room_booking.driven_adapter.repo.room_mapper import (
    apply_entity,
    entity_to_model,
    model_to_entity,
)


class RoomCommandRepoImpl(IRoomCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def insert(self, *, room: Room) -> Room:
        try:
            async with self.session_factory() as session:
                room_model = entity_to_model(room)
                session.add(room_model)
                await session.commit()
                await session.refresh(room_model)
                return model_to_entity(room_model)
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f'Failed to insert room {room.id}: {e}') from e

    @Logger.io
    async def get_by_id(self, *, room_id: str) -> Room | None:
        try:
            async with self.session_factory() as session:
                result = await session.execute(select(RoomModel).where(RoomModel.id == room_id))
                room_model = result.scalar_one_or_none()
                if not room_model:
                    return None
                return model_to_entity(room_model)
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f'Failed to load room {room_id}: {e}') from e

    @Logger.io
    async def save(self, *, room: Room) -> Room:
        """Full overwrite of the stored row; no version check"""
        try:
            async with self.session_factory() as session:
                room_model = await session.get(RoomModel, room.id)
                if room_model is None:
                    room_model = entity_to_model(room)
                    session.add(room_model)
                else:
                    apply_entity(room_model, room)
                await session.commit()
                await session.refresh(room_model)
                return model_to_entity(room_model)
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f'Failed to save room {room.id}: {e}') from e
