"""Error taxonomy shared by services, adapters and the API layer."""

_TRANSIENT_STATUSES = frozenset({408, 429})


class FridgeChefError(Exception):
    """Base class for application errors."""


class InputError(FridgeChefError):
    """Client supplied a missing or invalid image or ingredient list."""


class UpstreamError(FridgeChefError):
    """A hosted inference or generation service failed."""

    def __init__(
        self, message: str, *, service: str, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.service = service
        self.status_code = status_code


class UpstreamFormatError(UpstreamError):
    """Upstream service answered with an unexpected payload shape."""


class UpstreamUnavailable(UpstreamError):
    """Upstream service could not be reached, timed out or is overloaded."""


class UpstreamRejected(UpstreamError):
    """Upstream service refused the request, e.g. bad credentials or bad input."""


def upstream_status_error(
    message: str, *, service: str, status_code: int
) -> UpstreamError:
    """Classify an HTTP error status from an upstream service.

    5xx, 408 and 429 are transient and worth retrying; any other status means
    the same request would fail again.
    """
    if status_code >= 500 or status_code in _TRANSIENT_STATUSES:
        return UpstreamUnavailable(message, service=service, status_code=status_code)
    return UpstreamRejected(message, service=service, status_code=status_code)
