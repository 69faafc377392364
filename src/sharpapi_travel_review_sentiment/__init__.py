__version__ = "1.0.1"

from .config import DEFAULT_API_BASE_URL, SharpApiSettings  # noqa: E402
from .core import SharpApiCore, SharpApiCoreClient  # noqa: E402
from .exceptions import (  # noqa: E402
    SharpApiAuthError,
    SharpApiConnectionError,
    SharpApiError,
    SharpApiRateLimitError,
    SharpApiResponseError,
)
from .job_types import SharpApiJobType  # noqa: E402
from .logging_config import setup_observability, setup_structlog  # noqa: E402
from .service import SharpApiTravelReviewSentimentService  # noqa: E402
from .tracing import setup_tracing  # noqa: E402

__all__ = [
    "DEFAULT_API_BASE_URL",
    "SharpApiAuthError",
    "SharpApiConnectionError",
    "SharpApiCore",
    "SharpApiCoreClient",
    "SharpApiError",
    "SharpApiJobType",
    "SharpApiRateLimitError",
    "SharpApiResponseError",
    "SharpApiSettings",
    "SharpApiTravelReviewSentimentService",
    "setup_observability",
    "setup_structlog",
    "setup_tracing",
]
