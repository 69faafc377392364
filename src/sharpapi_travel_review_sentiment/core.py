"""Shared SharpAPI transport: authenticated requests and status URL parsing."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

import httpx
import structlog
from pydantic import ValidationError

from .config import DEFAULT_API_BASE_URL
from .exceptions import (
    SharpApiAuthError,
    SharpApiConnectionError,
    SharpApiError,
    SharpApiRateLimitError,
    SharpApiResponseError,
)
from .models import JobSubmission
from .tracing import get_tracer

logger = structlog.get_logger(__name__)
tracer = get_tracer(__name__)


@runtime_checkable
class SharpApiCore(Protocol):
    """The two operations a job submitter needs from a SharpAPI core client."""

    async def make_request(
        self, method: str, url: str, data: Optional[Mapping[str, Any]] = None
    ) -> httpx.Response: ...

    def parse_status_url(self, response: httpx.Response) -> str: ...


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or "SharpAPI error"
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)


def _retry_after(response: httpx.Response) -> float | None:
    try:
        return float(response.headers["Retry-After"])
    except (KeyError, ValueError):
        return None


class SharpApiCoreClient:
    """
    Minimal authenticated client for the SharpAPI REST API.

    Every call is a single attempt: non-2xx answers and transport failures are
    translated into ``SharpApiError`` subclasses and raised to the caller.
    """

    def __init__(
        self,
        api_key: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
        user_agent: str = "sharpapi-python-core",
        *,
        timeout: float = 180.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        if not api_key:
            raise ValueError("SharpAPI API key is required.")

        self.api_base_url = api_base_url.rstrip("/")
        self.user_agent = user_agent
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
            "User-Agent": user_agent,
        }
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def make_request(
        self, method: str, url: str, data: Optional[Mapping[str, Any]] = None
    ) -> httpx.Response:
        """
        Sends an authenticated request to ``api_base_url + url``.

        GET requests carry ``data`` as query parameters, everything else as a
        JSON body.
        """
        full_url = f"{self.api_base_url}{url}"
        method = method.upper()
        log = logger.bind(method=method, url=full_url)

        with tracer.start_as_current_span(
            f"sharpapi:{method}",
            attributes={"http.method": method, "http.url": full_url},
        ) as span:
            try:
                if method == "GET":
                    response = await self._client.request(
                        method, full_url, params=data, headers=self._headers
                    )
                else:
                    response = await self._client.request(
                        method, full_url, json=data, headers=self._headers
                    )

                span.set_attribute("http.status_code", response.status_code)
                response.raise_for_status()

                log.info("SharpAPI request successful", status_code=response.status_code)
                return response

            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                detail = _error_detail(e.response)
                span.set_attribute("error", True)
                span.record_exception(e)
                log.warning(
                    "SharpAPI returned an error status",
                    status_code=status_code,
                    detail=detail,
                )
                if status_code in (401, 403):
                    raise SharpApiAuthError(detail, status_code=status_code) from e
                if status_code == 429:
                    raise SharpApiRateLimitError(
                        detail, retry_after=_retry_after(e.response)
                    ) from e
                raise SharpApiError(detail, status_code=status_code) from e

            except httpx.RequestError as e:
                span.set_attribute("error", True)
                span.record_exception(e)
                log.error("SharpAPI request network error", error=str(e))
                raise SharpApiConnectionError(
                    f"Network error communicating with SharpAPI: {e.__class__.__name__}"
                ) from e

    def parse_status_url(self, response: httpx.Response) -> str:
        """Extracts the job status URL from a job submission response."""
        try:
            submission = JobSubmission.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(
                "Failed to parse SharpAPI job submission response",
                error=str(e),
                body=response.text,
            )
            raise SharpApiResponseError(
                "SharpAPI response does not contain a status_url."
            ) from e

        logger.debug(
            "SharpAPI job accepted",
            job_id=submission.job_id,
            status_url=submission.status_url,
        )
        return submission.status_url

    async def aclose(self):
        await self._client.aclose()
