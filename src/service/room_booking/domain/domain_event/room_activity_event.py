"""
Room Activity Entries

Immutable audit records appended to the activity index after each room
outcome. They are never read back by this service.
"""

from datetime import datetime, timezone
from typing import Any, ClassVar

import attrs

from src.service.room_booking.domain.entity.room_entity import Room
from src.service.room_booking.domain.enum.room_action import RoomAction


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@attrs.frozen
class RoomActivityEntry:
    action: ClassVar[RoomAction]

    room_id: str
    timestamp: datetime = attrs.field(factory=_utc_now, kw_only=True)

    def _fields(self) -> dict[str, Any]:
        return {}

    def to_document(self) -> dict[str, Any]:
        """Index document; keys match the room-logs mapping"""
        return {
            'action': self.action.value,
            'roomId': self.room_id,
            **self._fields(),
            'timestamp': self.timestamp,
        }


@attrs.frozen
class RoomCreatedEntry(RoomActivityEntry):
    action: ClassVar[RoomAction] = RoomAction.CREATE

    name: str
    price: float

    @classmethod
    def from_room(cls, *, room: Room) -> 'RoomCreatedEntry':
        return cls(room_id=room.id, name=room.name, price=room.price)

    def _fields(self) -> dict[str, Any]:
        return {'name': self.name, 'price': self.price}


@attrs.frozen
class RoomReservedEntry(RoomActivityEntry):
    action: ClassVar[RoomAction] = RoomAction.RESERVE

    guest: str

    def _fields(self) -> dict[str, Any]:
        return {'guest': self.guest}


@attrs.frozen
class ReservationConflictEntry(RoomActivityEntry):
    action: ClassVar[RoomAction] = RoomAction.CONFLICT

    attempted_guest: str
    current_guest: str

    def _fields(self) -> dict[str, Any]:
        return {'attemptedGuest': self.attempted_guest, 'currentGuest': self.current_guest}


@attrs.frozen
class ReservationCancelledEntry(RoomActivityEntry):
    action: ClassVar[RoomAction] = RoomAction.CANCEL
