# lotto_service/core/fetcher.py
"""
Upstream page fetcher: one GET per call, a fixed identifying header, a
per-request timeout, and typed failures.
"""

import httpx
import structlog
from tenacity import AsyncRetrying
from tenacity import retry_if_exception_type
from tenacity import stop_after_attempt
from tenacity import wait_exponential

from ..adapters.constants import LOTTO_HUB_USER_AGENT
from .exceptions import UpstreamStatusError
from .exceptions import UpstreamTimeoutError
from .exceptions import UpstreamUnreachableError


class UpstreamFetcher:
    """
    Thin wrapper over a shared ``httpx.AsyncClient``.

    Retries are off by default (``retry_attempts=1``). When enabled, only
    transport failures and timeouts are retried; an upstream that answers
    with an error status is reported immediately.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        user_agent: str = LOTTO_HUB_USER_AGENT,
        timeout: float = 10.0,
        retry_attempts: int = 1,
    ):
        self.http_client = http_client
        self.headers = {"User-Agent": user_agent}
        self.timeout = timeout
        self.retry_attempts = max(1, retry_attempts)
        self.logger = structlog.get_logger(self.__class__.__name__)

    async def fetch_text(self, url: str, source_name: str) -> str:
        """
        Returns the response body of ``url`` as text.

        Raises:
            UpstreamTimeoutError: The request did not complete within the timeout.
            UpstreamStatusError: The upstream answered with a non-2xx status.
            UpstreamUnreachableError: DNS, connection or protocol failure.
        """
        retryer = AsyncRetrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=5),
            retry=retry_if_exception_type(
                (UpstreamUnreachableError, UpstreamTimeoutError)
            ),
            reraise=True,
        )
        async for attempt in retryer:
            with attempt:
                return await self._get(url, source_name)

    async def _get(self, url: str, source_name: str) -> str:
        try:
            self.logger.debug("Making request", method="GET", url=url, adapter=source_name)
            response = await self.http_client.get(
                url, headers=self.headers, timeout=self.timeout, follow_redirects=True
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            self.logger.error("request_timeout", adapter=source_name, url=url, error=str(e))
            raise UpstreamTimeoutError(source_name, url, self.timeout) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            self.logger.error("http_status_error", adapter=source_name, status_code=status, url=url)
            raise UpstreamStatusError(source_name, status, url) from e
        except httpx.RequestError as e:
            self.logger.error("request_connection_error", adapter=source_name, url=url, error=str(e))
            raise UpstreamUnreachableError(source_name, url, str(e) or type(e).__name__) from e
        return response.text
