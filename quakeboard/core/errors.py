"""Feed error taxonomy.

Cancellation is not part of this hierarchy: a cancelled fetch surfaces as
asyncio.CancelledError and is swallowed by the caller.
"""


class FeedError(Exception):
    """Base class for feed fetch failures shown to the user."""

    @property
    def user_message(self) -> str:
        """Banner text for the dashboard."""
        return f"Failed to fetch earthquake data: {self}"


class NetworkFailure(FeedError):
    """Transport failure: DNS, connection refused, timeout."""

    @property
    def user_message(self) -> str:
        return "Network error. Please check your connection."


class HttpStatusFailure(FeedError):
    """The feed answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code of the response
    """

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"HTTP error! status: {status_code}")


class MalformedFeed(FeedError):
    """The feed document did not have the expected shape."""
