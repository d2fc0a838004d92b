"""Declarative HTTP request construction.

Describe an endpoint once (path, method, parameters, headers) and let the
router compile it into a ready-to-send request for a given server.
"""

from ._config import (
    ApiServer,
    ApiServerFactory,
    Environment,
    EnvironmentFactory,
    EnvironmentServerFactory,
    ServerConfig,
)
from ._netlinker import NetLinker
from ._services import (
    Completion,
    NetworkRouter,
    Router,
    StatusInfo,
    TaskHandle,
    Transport,
)
from ._utils import as_parameters, require_parameters, setup_logging
from .encoding import (
    JSONParameterEncoder,
    ParameterEncoder,
    ParameterEncoding,
    URLParameterEncoder,
)
from .models import (
    BaseUrlMissingError,
    CachePolicy,
    EncodingFailedError,
    Endpoint,
    EndPointType,
    HTTPHeaders,
    HTTPMethod,
    HTTPTask,
    InvalidBaseURLError,
    InvalidPathError,
    MissingURLError,
    Parameters,
    ParametersAndHeadersTask,
    ParametersNilError,
    ParametersTask,
    PlainTask,
    RequestBuildError,
    RequestDraft,
    UnsupportedTaskError,
)

__all__ = [
    "ApiServer",
    "ApiServerFactory",
    "BaseUrlMissingError",
    "CachePolicy",
    "Completion",
    "EncodingFailedError",
    "Endpoint",
    "EndPointType",
    "Environment",
    "EnvironmentFactory",
    "EnvironmentServerFactory",
    "HTTPHeaders",
    "HTTPMethod",
    "HTTPTask",
    "InvalidBaseURLError",
    "InvalidPathError",
    "JSONParameterEncoder",
    "MissingURLError",
    "NetLinker",
    "NetworkRouter",
    "ParameterEncoder",
    "ParameterEncoding",
    "Parameters",
    "ParametersAndHeadersTask",
    "ParametersNilError",
    "ParametersTask",
    "PlainTask",
    "RequestBuildError",
    "RequestDraft",
    "Router",
    "ServerConfig",
    "StatusInfo",
    "TaskHandle",
    "Transport",
    "URLParameterEncoder",
    "UnsupportedTaskError",
    "as_parameters",
    "require_parameters",
    "setup_logging",
]
