import time

from src.platform.exception.exceptions import SinkError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.room_booking_metrics import RoomBookingMetrics
from src.service.room_booking.app.interface.i_activity_log_sink import IActivityLogSink
from src.service.room_booking.domain.domain_event.room_activity_event import RoomActivityEntry


class ActivityLogRecorder:
    """
    Best-effort side effect run after a room outcome is settled.

    The append is awaited so entries keep request order, but a SinkError is
    only logged and counted. It is returned on its own channel and never
    undoes or alters the primary result.
    """

    def __init__(self, *, activity_log_sink: IActivityLogSink, metrics: RoomBookingMetrics) -> None:
        self.activity_log_sink = activity_log_sink
        self.metrics = metrics

    async def record(self, *, entry: RoomActivityEntry) -> SinkError | None:
        start = time.perf_counter()
        try:
            await self.activity_log_sink.append(entry=entry)
        except SinkError as e:
            self.metrics.record_activity_log_append(
                action=entry.action, success=False, duration=time.perf_counter() - start
            )
            Logger.base.warning(
                f'⚠️ [ACTIVITY] Failed to append {entry.action} entry for room {entry.room_id}: {e}'
            )
            return e

        self.metrics.record_activity_log_append(
            action=entry.action, success=True, duration=time.perf_counter() - start
        )
        return None
