"""Fatal error types raised while searching pixiv."""


class PixivPopularError(Exception):
    """Base class for errors that abort a search."""

    exit_code = 1


class TransportError(PixivPopularError):
    """The request never produced a response (DNS, connect, timeout, TLS)."""


class ResponseDecodeError(PixivPopularError):
    """The response body was not valid text or not valid JSON."""


class ShapeMismatchError(PixivPopularError):
    """The JSON parsed but does not have the structure pixiv used to return."""
