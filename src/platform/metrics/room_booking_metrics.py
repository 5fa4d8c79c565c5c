from prometheus_client import Counter, Histogram


class RoomBookingMetrics:
    """
    Room Booking Core Metrics Collector

    Tracks reservation outcomes and the health of the activity log sink
    """

    def __init__(self):
        # ========== Room Business Metrics ==========
        self.rooms_created = Counter(
            'room_created_total',
            'Total rooms created',
        )

        self.reservation_requests = Counter(
            'room_reservation_requests_total',
            'Total room reservation requests',
            ['result'],  # result: reserved/conflict/not_found
        )

        self.cancellation_requests = Counter(
            'room_cancellation_requests_total',
            'Total reservation cancellation requests',
            ['result'],  # result: cancelled/not_found
        )

        # ========== Activity Log Sink Metrics ==========
        self.activity_log_appends = Counter(
            'room_activity_log_appends_total',
            'Activity log append attempts',
            ['action', 'result'],  # result: success/failure
        )

        self.activity_log_append_duration = Histogram(
            'room_activity_log_append_duration_seconds',
            'Activity log append duration',
            ['action'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
        )

    # ========== Helper Methods ==========

    def record_room_created(self):
        self.rooms_created.inc()

    def record_reservation(self, *, result: str):
        self.reservation_requests.labels(result=result).inc()

    def record_cancellation(self, *, result: str):
        self.cancellation_requests.labels(result=result).inc()

    def record_activity_log_append(self, *, action: str, success: bool, duration: float):
        self.activity_log_appends.labels(
            action=action, result='success' if success else 'failure'
        ).inc()
        self.activity_log_append_duration.labels(action=action).observe(duration)


# Global metrics instance
metrics = RoomBookingMetrics()
