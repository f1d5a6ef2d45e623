"""Async client for the search service REST API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx

from azquery.core.exceptions import (
    SearchServiceError,
    SearchServiceUnavailableError,
    ValidationError,
)
from azquery.query.builder import QueryRequest
from azquery.search.models import ResponseEnvelope

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2020-06-30"
SERVICE_URL_TEMPLATE = "https://{service_name}.search.windows.net"


class AsyncSearchClient:
    """
    Async wrapper around the search REST API of a search service.

    Only issues requests; building them is the job of ``QueryBuilder`` and
    shaping responses the job of ``shape``.
    """

    def __init__(
        self,
        service_name: str | None = None,
        api_key: str | None = None,
        *,
        endpoint: str | None = None,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize the search client.

        Args:
            service_name: Search service name, used to derive the endpoint
            api_key: Query or admin key sent in the ``api-key`` header
            endpoint: Explicit base URL, overrides ``service_name``
            api_version: REST API version
            timeout: Request timeout in seconds
        """
        if not endpoint and not service_name:
            raise ValidationError("Either a service name or an endpoint is required")

        self._base_url = (endpoint or SERVICE_URL_TEMPLATE.format(service_name=service_name)).rstrip("/")
        self._api_key = api_key
        self._api_version = api_version
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                headers=self._get_default_headers(),
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise SearchServiceUnavailableError(
                f"HTTP error: {e}",
                details={"base_url": self._base_url},
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": "azquery/0.1",
            "Accept": "application/json",
        }
        if self._api_key:
            headers["api-key"] = self._api_key
        return headers

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def search_raw(
        self,
        index_name: str,
        request: QueryRequest,
    ) -> dict[str, Any]:
        """
        Search an index and return the JSON body as-is.

        Args:
            index_name: Name of the index to search
            request: Built query request

        Returns:
            Decoded response body

        Raises:
            SearchServiceError: The service answered with a non-success status
            SearchServiceUnavailableError: The service could not be reached
        """
        body = request.to_search_body()
        logger.debug(f"Searching index {index_name} with {body}")

        async with self._get_client() as client:
            response = await client.post(
                f"/indexes/{index_name}/docs/search",
                params={"api-version": self._api_version},
                json=body,
            )

        if not response.is_success:
            raise self._service_error(response, index_name)

        return response.json()

    async def search(
        self,
        index_name: str,
        request: QueryRequest,
    ) -> ResponseEnvelope:
        """Search an index and parse the response envelope."""
        return ResponseEnvelope.model_validate(await self.search_raw(index_name, request))

    @staticmethod
    def _service_error(response: httpx.Response, index_name: str) -> SearchServiceError:
        """Build an error from a failed response, using the service's message if any."""
        message = f"Search on index {index_name} failed with status {response.status_code}"
        details: dict[str, Any] = {"index": index_name}
        try:
            data = response.json()
        except ValueError:
            data = None
        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict):
            if error.get("message"):
                message = f"{message}: {error['message']}"
            if error.get("code"):
                details["code"] = error["code"]

        logger.warning(message)
        return SearchServiceError(message, status_code=response.status_code, details=details)

    async def __aenter__(self) -> AsyncSearchClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def make_client(service_name: str, api_key: str, **kwargs: Any) -> AsyncSearchClient:
    """Create a client for a search service from its name and access key."""
    return AsyncSearchClient(service_name, api_key, **kwargs)
