"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.room_booking.driven_adapter.model.room_model import RoomModel

__all__ = [
    'RoomModel',
]
