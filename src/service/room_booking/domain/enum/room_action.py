from enum import StrEnum


class RoomAction(StrEnum):
    """Action recorded in each activity log entry"""

    CREATE = 'create'
    RESERVE = 'reserve'
    CONFLICT = 'conflict'
    CANCEL = 'cancel'
