"""
Activity Log Sink Implementation

Indexes each room activity entry as one document in Elasticsearch
(`POST /{index}/_doc`). Transport and HTTP failures become SinkError.
"""

import httpx
import orjson

from src.platform.exception.exceptions import SinkError
from src.platform.logging.loguru_io import Logger
from src.platform.search.elasticsearch_client import ElasticsearchClient
from src.service.room_booking.app.interface.i_activity_log_sink import IActivityLogSink
from src.service.room_booking.domain.domain_event.room_activity_event import RoomActivityEntry


class ElasticsearchActivityLogSink(IActivityLogSink):
    def __init__(self, *, elasticsearch_client: ElasticsearchClient, index: str) -> None:
        self.elasticsearch_client = elasticsearch_client
        self.index = index

    @Logger.io
    async def append(self, *, entry: RoomActivityEntry) -> None:
        try:
            body = orjson.dumps(entry.to_document())
            response = await self.elasticsearch_client.get_client().post(
                f'/{self.index}/_doc', content=body
            )
        except (httpx.HTTPError, orjson.JSONEncodeError) as e:
            raise SinkError(f'Could not index {entry.action} entry: {e}') from e

        if not response.is_success:
            raise SinkError(
                f'Elasticsearch rejected {entry.action} entry: HTTP {response.status_code} {response.text[:200]}'
            )
