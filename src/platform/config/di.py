"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.metrics.room_booking_metrics import metrics
from src.platform.search.elasticsearch_client import ElasticsearchClient
from src.service.room_booking.app.service.activity_log_recorder import ActivityLogRecorder
from src.service.room_booking.driven_adapter.repo.room_command_repo_impl import (
    RoomCommandRepoImpl,
)
from src.service.room_booking.driven_adapter.repo.room_query_repo_impl import RoomQueryRepoImpl
from src.service.room_booking.driven_adapter.search.activity_log_sink_impl import (
    ElasticsearchActivityLogSink,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (one session per repository call)
    database = providers.Singleton(Database)

    # Search cluster backing the activity log
    elasticsearch_client = providers.Singleton(ElasticsearchClient)

    # Prometheus collectors are process-global
    metrics = providers.Object(metrics)

    # Repositories (stateless - use session_factory per call)
    room_command_repo = providers.Singleton(
        RoomCommandRepoImpl, session_factory=database.provided.session
    )
    room_query_repo = providers.Singleton(
        RoomQueryRepoImpl, session_factory=database.provided.session
    )

    # Activity log (best-effort secondary write)
    activity_log_sink = providers.Singleton(
        ElasticsearchActivityLogSink,
        elasticsearch_client=elasticsearch_client,
        index=config_service.provided.ROOM_LOG_INDEX,
    )
    activity_log_recorder = providers.Singleton(
        ActivityLogRecorder,
        activity_log_sink=activity_log_sink,
        metrics=metrics,
    )


container = Container()
