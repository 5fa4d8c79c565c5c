from sqlalchemy import Boolean, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.service.room_booking.domain.entity.room_entity import UNOCCUPIED_GUEST


class RoomModel(Base):
    __tablename__ = 'room'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID7
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    guest: Mapped[str] = mapped_column(String(255), nullable=False, default=UNOCCUPIED_GUEST)
    is_booked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
