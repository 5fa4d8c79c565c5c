"""
Unit tests for room activity entries and their index documents
"""

from datetime import datetime, timezone

import pytest

from src.service.room_booking.domain.domain_event.room_activity_event import (
    ReservationCancelledEntry,
    ReservationConflictEntry,
    RoomCreatedEntry,
    RoomReservedEntry,
)
from src.service.room_booking.domain.entity.room_entity import Room
from src.service.room_booking.domain.enum.room_action import RoomAction


FIXED_TIME = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.mark.unit
class TestRoomActivityEntry:
    def test_created_entry_from_room(self):
        room = Room(id='room-1', name='Suite 1', price=200)

        entry = RoomCreatedEntry.from_room(room=room)

        assert entry.action == RoomAction.CREATE
        assert entry.to_document() | {'timestamp': None} == {
            'action': 'create',
            'roomId': 'room-1',
            'name': 'Suite 1',
            'price': 200,
            'timestamp': None,
        }

    def test_reserved_entry_document(self):
        entry = RoomReservedEntry(room_id='room-1', guest='Bob', timestamp=FIXED_TIME)

        assert entry.to_document() == {
            'action': 'reserve',
            'roomId': 'room-1',
            'guest': 'Bob',
            'timestamp': FIXED_TIME,
        }

    def test_conflict_entry_names_both_guests(self):
        entry = ReservationConflictEntry(
            room_id='room-1', attempted_guest='Carol', current_guest='Bob', timestamp=FIXED_TIME
        )

        document = entry.to_document()

        assert document['action'] == 'conflict'
        assert document['attemptedGuest'] == 'Carol'
        assert document['currentGuest'] == 'Bob'

    def test_cancelled_entry_has_no_extra_fields(self):
        entry = ReservationCancelledEntry(room_id='room-1', timestamp=FIXED_TIME)

        assert entry.to_document() == {
            'action': 'cancel',
            'roomId': 'room-1',
            'timestamp': FIXED_TIME,
        }

    def test_timestamp_defaults_to_utc_now(self):
        before = datetime.now(timezone.utc)
        entry = ReservationCancelledEntry(room_id='room-1')
        after = datetime.now(timezone.utc)

        assert before <= entry.timestamp <= after
        assert entry.timestamp.tzinfo is not None
