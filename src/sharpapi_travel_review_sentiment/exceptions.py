class SharpApiError(Exception):
    """Base exception for all errors raised while talking to SharpAPI."""

    def __init__(self, detail: str, status_code: int = 500):
        self.detail = detail
        self.status_code = status_code
        super().__init__(self.detail)


class SharpApiAuthError(SharpApiError):
    """Raised when SharpAPI rejects the API key."""

    def __init__(self, detail: str = "Invalid or missing API key", status_code: int = 401):
        super().__init__(detail, status_code=status_code)


class SharpApiRateLimitError(SharpApiError):
    """Raised when the account is throttled (HTTP 429)."""

    def __init__(
        self, detail: str = "Too many requests", retry_after: float | None = None
    ):
        self.retry_after = retry_after
        super().__init__(detail, status_code=429)


class SharpApiConnectionError(SharpApiError):
    """Raised when SharpAPI could not be reached at all."""

    def __init__(self, detail: str = "Network error communicating with SharpAPI"):
        super().__init__(detail, status_code=503)


class SharpApiResponseError(SharpApiError):
    """Raised when SharpAPI answers with a body we cannot interpret."""

    def __init__(self, detail: str = "Malformed response from SharpAPI"):
        super().__init__(detail, status_code=502)
