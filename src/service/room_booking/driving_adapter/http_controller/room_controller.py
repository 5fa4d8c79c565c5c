from typing import List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.room_booking.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.room_booking.app.command.create_room_use_case import CreateRoomUseCase
from src.service.room_booking.app.command.reserve_room_use_case import ReserveRoomUseCase
from src.service.room_booking.app.dto.room_outcome import RoomConflict, RoomNotFound
from src.service.room_booking.app.query.list_rooms_use_case import ListRoomsUseCase
from src.service.room_booking.driving_adapter.schema.room_schema import (
    MessageResponse,
    RoomCreateRequest,
    RoomMessageResponse,
    RoomReserveRequest,
    RoomResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)

_ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {'model': MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {'model': MessageResponse},
}


@router.get('')
@Logger.io
async def list_rooms(
    use_case: ListRoomsUseCase = Depends(ListRoomsUseCase.depends),
) -> List[RoomResponse]:
    rooms = await use_case.execute()
    return [RoomResponse.from_entity(room) for room in rooms]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_room(
    request: RoomCreateRequest,
    use_case: CreateRoomUseCase = Depends(CreateRoomUseCase.depends),
) -> RoomMessageResponse:
    room = await use_case.execute(name=request.name, price=request.price)
    return RoomMessageResponse(message='Room created', room=RoomResponse.from_entity(room))


@router.put(
    '/{room_id}',
    responses={**_ERROR_RESPONSES, status.HTTP_409_CONFLICT: {'model': MessageResponse}},
)
@Logger.io
async def reserve_room(
    room_id: str,
    request: RoomReserveRequest,
    use_case: ReserveRoomUseCase = Depends(ReserveRoomUseCase.depends),
) -> RoomMessageResponse:
    with tracer.start_as_current_span('controller.reserve_room') as span:
        span.set_attribute('room.id', room_id)

        outcome = await use_case.execute(room_id=room_id, guest=request.name)
        if isinstance(outcome, RoomNotFound):
            raise NotFoundError(outcome.message)
        if isinstance(outcome, RoomConflict):
            raise ConflictError(outcome.message)

        return RoomMessageResponse(
            message=outcome.message, room=RoomResponse.from_entity(outcome.room)
        )


@router.put('/{room_id}/cancel', responses=_ERROR_RESPONSES)
@Logger.io
async def cancel_reservation(
    room_id: str,
    use_case: CancelReservationUseCase = Depends(CancelReservationUseCase.depends),
) -> RoomMessageResponse:
    outcome = await use_case.execute(room_id=room_id)
    if isinstance(outcome, RoomNotFound):
        raise NotFoundError(outcome.message)

    return RoomMessageResponse(message=outcome.message, room=RoomResponse.from_entity(outcome.room))
