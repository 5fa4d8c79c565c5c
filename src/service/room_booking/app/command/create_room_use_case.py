from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.room_booking_metrics import RoomBookingMetrics
from src.service.room_booking.app.interface.i_room_command_repo import IRoomCommandRepo
from src.service.room_booking.app.service.activity_log_recorder import ActivityLogRecorder
from src.service.room_booking.domain.domain_event.room_activity_event import RoomCreatedEntry
from src.service.room_booking.domain.entity.room_entity import Room


class CreateRoomUseCase:
    """
    Create an empty room.

    Flow:
    1. Validate and build an Unoccupied room
    2. Insert it (a store failure aborts here, nothing is logged)
    3. Record a `create` activity entry (best effort)
    """

    def __init__(
        self,
        *,
        room_command_repo: IRoomCommandRepo,
        activity_log_recorder: ActivityLogRecorder,
        metrics: RoomBookingMetrics,
    ) -> None:
        self.room_command_repo = room_command_repo
        self.activity_log_recorder = activity_log_recorder
        self.metrics = metrics

    @classmethod
    @inject
    def depends(
        cls,
        room_command_repo: IRoomCommandRepo = Depends(Provide[Container.room_command_repo]),
        activity_log_recorder: ActivityLogRecorder = Depends(
            Provide[Container.activity_log_recorder]
        ),
        metrics: RoomBookingMetrics = Depends(Provide[Container.metrics]),
    ) -> Self:
        return cls(
            room_command_repo=room_command_repo,
            activity_log_recorder=activity_log_recorder,
            metrics=metrics,
        )

    @Logger.io
    async def execute(self, *, name: str, price: float) -> Room:
        room = Room.create(name=name, price=price)
        created_room = await self.room_command_repo.insert(room=room)
        self.metrics.record_room_created()

        Logger.base.info(f'🏨 [CREATE] Room {created_room.id} created: {created_room.name}')

        await self.activity_log_recorder.record(entry=RoomCreatedEntry.from_room(room=created_room))
        return created_room
