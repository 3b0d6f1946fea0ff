# src/mr_reviewer/errors.py


class ReviewError(Exception):
    """Base class for failures that abort a review call."""


class ConfigurationError(ReviewError):
    """A required configuration variable is missing."""


class TransportError(ReviewError):
    """The provider call failed or answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseShapeError(ReviewError):
    """The provider reply could not be decoded or lacked the text-bearing field."""


class OutputParseError(ReviewError):
    """The model answer in threads mode is not the expected JSON document."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw
