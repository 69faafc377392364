import structlog

from . import __version__
from .config import DEFAULT_API_BASE_URL, SharpApiSettings
from .core import SharpApiCore, SharpApiCoreClient
from .job_types import SharpApiJobType

logger = structlog.get_logger(__name__)

USER_AGENT = f"sharpapi-python-travel-review-sentiment/{__version__}"


class SharpApiTravelReviewSentimentService:
    """Submits travel and hospitality reviews to SharpAPI for sentiment analysis."""

    def __init__(
        self,
        api_key: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
        *,
        core: SharpApiCore | None = None,
        timeout: float = 180.0,
    ):
        self._owns_core = core is None
        if core is None:
            core = SharpApiCoreClient(
                api_key, api_base_url, user_agent=USER_AGENT, timeout=timeout
            )
        self.core = core

    @classmethod
    def from_settings(
        cls, settings: SharpApiSettings | None = None
    ) -> "SharpApiTravelReviewSentimentService":
        """Builds the service from environment-driven settings."""
        settings = settings or SharpApiSettings()
        return cls(
            settings.api_key, settings.api_base_url, timeout=settings.timeout
        )

    async def submit(self, text: str) -> str:
        """
        Parses a travel/hospitality product review and queues a job computing
        its sentiment (POSITIVE/NEGATIVE/NEUTRAL) with a 0-100% score.

        Args:
            text: The review content. Sent as-is; SharpAPI enforces any limits.

        Returns:
            The status URL to poll for the job's result.
        """
        data = {"content": text}
        logger.debug("Submitting travel review sentiment job", length=len(text))
        response = await self.core.make_request(
            "POST", SharpApiJobType.TTH_REVIEW_SENTIMENT.url, data
        )
        return self.core.parse_status_url(response)

    async def aclose(self):
        if self._owns_core:
            await self.core.aclose()

    async def __aenter__(self) -> "SharpApiTravelReviewSentimentService":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
