
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.service.room_booking.domain.entity.room_entity import UNOCCUPIED_GUEST, Room


class RoomCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'name': 'Suite 1', 'price': 200}},
    )

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, strict=True)

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('name must not be blank')
        return v


class RoomReserveRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'name': 'Bob'}},
    )

    name: str = Field(..., min_length=1, description='Guest name')

    @field_validator('name')
    @classmethod
    def guest_name_valid(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('name must not be blank')
        if v == UNOCCUPIED_GUEST:
            raise ValueError(f'name cannot be "{UNOCCUPIED_GUEST}"')
        return v


class RoomResponse(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'id': '0192f0c4-7b7e-7c3a-9a51-2f0b6d1e4c11',
                'name': 'Suite 1',
                'price': 200,
                'guest': 'Bob',
                'isBooked': True,
            }
        },
    )

    id: str
    name: str
    price: float
    guest: str
    is_booked: bool = Field(..., serialization_alias='isBooked')

    @classmethod
    def from_entity(cls, room: Room) -> 'RoomResponse':
        return cls(
            id=room.id,
            name=room.name,
            price=room.price,
            guest=room.guest,
            is_booked=room.is_booked,
        )


class RoomMessageResponse(BaseModel):
    message: str
    room: RoomResponse


class MessageResponse(BaseModel):
    message: str
