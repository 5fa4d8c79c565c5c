from typing import Union

import attrs
from uuid_utils import uuid7

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger


# Guest value stored and exposed while a room has no occupant
UNOCCUPIED_GUEST = 'None'


@attrs.frozen
class Unoccupied:
    pass


@attrs.frozen
class Occupied:
    guest: str


Occupancy = Union[Unoccupied, Occupied]

UNOCCUPIED = Unoccupied()


def occupancy_from_guest(guest: str | None) -> Occupancy:
    """Rebuild occupancy from the stored guest column; the booked flag is derived, never read."""
    if guest is None or guest == UNOCCUPIED_GUEST:
        return UNOCCUPIED
    return Occupied(guest=guest)


def validate_guest_name(guest: str) -> None:
    if not guest or not guest.strip():
        raise DomainError('Guest name is required')
    if guest == UNOCCUPIED_GUEST:
        raise DomainError(f'Guest name cannot be "{UNOCCUPIED_GUEST}"')


@attrs.define
class Room:
    id: str
    name: str
    price: float
    occupancy: Occupancy = UNOCCUPIED

    @classmethod
    @Logger.io
    def create(cls, *, name: str, price: float) -> 'Room':
        if not name or not name.strip():
            raise DomainError('Room name is required')
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise DomainError('Room price must be a number')
        if price < 0:
            raise DomainError('Room price must not be negative')

        return cls(id=str(uuid7()), name=name, price=price, occupancy=UNOCCUPIED)

    @property
    def is_booked(self) -> bool:
        return isinstance(self.occupancy, Occupied)

    @property
    def guest(self) -> str:
        if isinstance(self.occupancy, Occupied):
            return self.occupancy.guest
        return UNOCCUPIED_GUEST

    def reserve(self, *, guest: str) -> 'Room':
        """
        Unoccupied -> Occupied(guest)

        Raises:
            DomainError: When the room is already occupied; callers check
                `is_booked` first and report a conflict instead.
        """
        validate_guest_name(guest)
        if self.is_booked:
            raise DomainError(f'Room already reserved by {self.guest}', 409)
        return attrs.evolve(self, occupancy=Occupied(guest=guest))

    def cancel(self) -> 'Room':
        """Any state -> Unoccupied. Cancelling an empty room is allowed."""
        return attrs.evolve(self, occupancy=UNOCCUPIED)
