from .endpoint import (
    Endpoint,
    EndPointType,
    HTTPHeaders,
    HTTPMethod,
    HTTPTask,
    Parameters,
    ParametersAndHeadersTask,
    ParametersTask,
    PlainTask,
)
from .errors import (
    BaseUrlMissingError,
    EncodingFailedError,
    InvalidBaseURLError,
    InvalidPathError,
    MissingURLError,
    ParametersNilError,
    RequestBuildError,
    UnsupportedTaskError,
)
from .request import CachePolicy, RequestDraft

__all__ = [
    "BaseUrlMissingError",
    "CachePolicy",
    "EncodingFailedError",
    "Endpoint",
    "EndPointType",
    "HTTPHeaders",
    "HTTPMethod",
    "HTTPTask",
    "InvalidBaseURLError",
    "InvalidPathError",
    "MissingURLError",
    "Parameters",
    "ParametersAndHeadersTask",
    "ParametersNilError",
    "ParametersTask",
    "PlainTask",
    "RequestBuildError",
    "RequestDraft",
    "UnsupportedTaskError",
]
