from typing import Optional


class ComparisonError(Exception):
    """Base error; carries the HTTP status the endpoint answers with."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(ComparisonError):
    pass


class ValidationError(ComparisonError):
    status_code = 400


class UnsupportedFormatError(ComparisonError):
    status_code = 400


class ExternalServiceError(ComparisonError):
    pass


class MalformedResponseError(ComparisonError):
    pass


# raised by the HTTP client, never by the endpoint

class ComparisonRequestError(ComparisonError):
    pass


class InvalidResponseError(ComparisonError):
    pass
