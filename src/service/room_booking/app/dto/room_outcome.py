"""
Typed results of the reservation use cases.

Not-found and conflict are expected business outcomes, so they are returned
rather than raised. The HTTP layer maps each one to a status code.
"""

from typing import Union

import attrs

from src.service.room_booking.domain.entity.room_entity import Room


@attrs.frozen
class RoomNotFound:
    room_id: str

    @property
    def message(self) -> str:
        return 'Room not found'


@attrs.frozen
class RoomReserved:
    room: Room

    @property
    def message(self) -> str:
        return f'Room reserved by {self.room.guest}'


@attrs.frozen
class RoomConflict:
    room: Room
    attempted_guest: str

    @property
    def current_guest(self) -> str:
        return self.room.guest

    @property
    def message(self) -> str:
        return f'Conflict: room is already reserved by {self.current_guest}'


@attrs.frozen
class ReservationCancelled:
    room: Room

    @property
    def message(self) -> str:
        return 'Reservation cancelled'


ReservationOutcome = Union[RoomReserved, RoomConflict, RoomNotFound]
CancellationOutcome = Union[ReservationCancelled, RoomNotFound]
