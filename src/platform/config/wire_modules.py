"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.room_booking.app.command import (
    cancel_reservation_use_case,
    create_room_use_case,
    reserve_room_use_case,
)
from src.service.room_booking.app.query import list_rooms_use_case


WIRE_MODULES: list[ModuleType] = [
    create_room_use_case,
    reserve_room_use_case,
    cancel_reservation_use_case,
    list_rooms_use_case,
]
