from src.service.room_booking.domain.entity.room_entity import Room, occupancy_from_guest
from src.service.room_booking.driven_adapter.model.room_model import RoomModel


def model_to_entity(room_model: RoomModel) -> Room:
    return Room(
        id=room_model.id,
        name=room_model.name,
        price=room_model.price,
        occupancy=occupancy_from_guest(room_model.guest),
    )


def apply_entity(room_model: RoomModel, room: Room) -> RoomModel:
    """Copy every column from the entity; guest and is_booked are derived together."""
    room_model.name = room.name
    room_model.price = room.price
    room_model.guest = room.guest
    room_model.is_booked = room.is_booked
    return room_model


def entity_to_model(room: Room) -> RoomModel:
    return apply_entity(RoomModel(id=room.id), room)
