class RequestBuildError(Exception):
    """Base class for every failure raised while building a request."""

    default_message = "Request could not be built."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidBaseURLError(RequestBuildError):
    default_message = "Base URL is invalid."


class MissingURLError(RequestBuildError):
    default_message = "URL is nil."


class InvalidPathError(RequestBuildError):
    """Raised when the version or endpoint path cannot form a valid URL path."""

    default_message = "URL path is invalid."


class UnsupportedTaskError(RequestBuildError):
    default_message = "Endpoint task is not supported."


class EncodingFailedError(RequestBuildError):
    default_message = "Parameters encoding failed."


class ParametersNilError(RequestBuildError):
    """Raised by callers that require a non-empty parameter set."""

    default_message = "Parameters are nil."


class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Base URL is not configured. Pass base_url explicitly or set the NETLINKER_BASE_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)
