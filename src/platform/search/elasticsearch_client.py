from typing import Optional

import httpx

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class ElasticsearchClient:
    """
    Async HTTP client for the Elasticsearch REST API.

    The underlying httpx client is created lazily and shared by every caller.

    Usage:
        await elasticsearch_client.ping()  # In startup, logs reachability
        client = elasticsearch_client.get_client()  # In adapters
        await elasticsearch_client.close()  # In shutdown
    """

    def __init__(
        self,
        *,
        node: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.node = (node or settings.ELASTICSEARCH_NODE).rstrip('/')
        self._username = username if username is not None else settings.ELASTIC_USERNAME
        self._password = (
            password if password is not None else settings.ELASTIC_PASSWORD.get_secret_value()
        )
        self._timeout = timeout if timeout is not None else settings.ELASTICSEARCH_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.node,
                auth=httpx.BasicAuth(self._username, self._password) if self._username else None,
                timeout=self._timeout,
                transport=self._transport,
                headers={'Content-Type': 'application/json'},
            )
        return self._client

    async def ping(self) -> bool:
        """Return True when the cluster answers. Never raises."""
        try:
            response = await self.get_client().head('/')
        except httpx.HTTPError as e:
            Logger.base.error(f'❌ [Elasticsearch] Not connected at {self.node}: {e}')
            return False

        if response.is_success:
            Logger.base.info(f'📡 [Elasticsearch] Connected at {self.node}')
            return True

        Logger.base.error(
            f'❌ [Elasticsearch] Not connected at {self.node}: HTTP {response.status_code}'
        )
        return False

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
