from typing import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from sharpapi_travel_review_sentiment.core import SharpApiCoreClient
from sharpapi_travel_review_sentiment.service import (
    SharpApiTravelReviewSentimentService,
)


@pytest.fixture
def mock_core() -> MagicMock:
    """
    Provides a mock core client. Speccing against SharpApiCoreClient turns
    the async ``make_request`` into an AsyncMock automatically.
    """
    return MagicMock(spec=SharpApiCoreClient)


@pytest.fixture
def sentiment_service(mock_core: MagicMock) -> SharpApiTravelReviewSentimentService:
    """Provides the sentiment service wired to the mocked core client."""
    return SharpApiTravelReviewSentimentService("test-api-key", core=mock_core)


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_core_client(
    recorded_requests: list[httpx.Request],
) -> Callable[..., SharpApiCoreClient]:
    """
    Builds a real SharpApiCoreClient whose HTTP traffic is answered by
    ``handler`` through httpx.MockTransport. Every request is recorded.
    """

    def factory(
        handler: Callable[[httpx.Request], httpx.Response], **kwargs
    ) -> SharpApiCoreClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return SharpApiCoreClient("test-api-key", http_client=http_client, **kwargs)

    return factory
