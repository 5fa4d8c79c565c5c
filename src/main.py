"""
Production FastAPI Application

Room booking API backed by PostgreSQL, with activity logging to Elasticsearch.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_engine,
)
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Room Booking] Starting up...')

    tracing = TracingConfig(service_name='room-booking-service')
    tracing.setup()
    Logger.base.info('📊 [Room Booking] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Room Booking] Dependency injection wired')

    # Database is required: fail fast when it is unreachable
    engine = get_engine()
    tracing.instrument_sqlalchemy(engine=engine)
    try:
        await create_db_and_tables(engine)
    except Exception as e:
        Logger.base.error(f'❌ [Room Booking] Could not connect to the database: {e}')
        raise
    Logger.base.info('🗄️  [Room Booking] Connected to the database')

    # Activity log is best effort: keep serving when Elasticsearch is down
    elasticsearch_client = container.elasticsearch_client()
    await elasticsearch_client.ping()

    Logger.base.info(
        f'✅ [Room Booking] Startup complete, listening on http://{settings.HOST}:{settings.PORT}'
    )

    yield

    Logger.base.info('🛑 [Room Booking] Shutting down...')

    await elasticsearch_client.close()
    await dispose_engine()

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Room Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


if __name__ == '__main__':
    uvicorn.run('src.main:app', host=settings.HOST, port=settings.PORT)
