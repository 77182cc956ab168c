# ABOUTME: Exception types raised by the content layer.
# ABOUTME: ContentLoadError signals a whole-batch fetch failure, distinct from an empty result.


class AgriNewsError(Exception):
    """Base class for agri_news errors."""


class ContentLoadError(AgriNewsError):
    """A fetch failed as a whole: transport, HTTP status, JSON or schema error.

    No partial list is ever produced alongside this error.
    """

    def __init__(self, endpoint: str, reason: str) -> None:
        super().__init__(f"{endpoint}: {reason}")
        self.endpoint = endpoint
        self.reason = reason
