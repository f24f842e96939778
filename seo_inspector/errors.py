"""Failure taxonomy for the analysis pipeline.

Every error carries a ``message`` safe to hand back to an API client.
"""


class SEOInspectorError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SEOInspectorError):
    """The submitted URL is missing or malformed."""


class NetworkError(SEOInspectorError):
    """DNS failure, timeout, refused connection, too many redirects."""


class FetchError(SEOInspectorError):
    """The server answered with a non-success status."""

    def __init__(self, status_code: int, status_text: str):
        super().__init__(f"Failed to fetch URL: {status_code} {status_text}".rstrip())
        self.status_code = status_code
        self.status_text = status_text


class ParseError(SEOInspectorError):
    pass


class SchemaError(SEOInspectorError):
    """The assembled report does not match its own schema."""

    def __init__(self, details: str, message: str = "Error validating analysis results"):
        super().__init__(message)
        self.details = details
