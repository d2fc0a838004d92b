"""Endpoint description models.

An endpoint is a declarative description of one API call: the relative path,
the HTTP method, the task (which parameters and extra headers it carries) and
optional headers. The router turns it into a request draft.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

HTTPHeaders = Mapping[str, str]
Parameters = Mapping[str, Any]


class HTTPMethod(str, Enum):
    """HTTP methods supported by endpoints. Values are the wire names."""

    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class PlainTask:
    """A request without parameters or additional headers."""


@dataclass(frozen=True)
class ParametersTask:
    """A request with optional JSON body parameters and/or URL parameters."""

    body_parameters: Optional[Parameters] = None
    url_parameters: Optional[Parameters] = None


@dataclass(frozen=True)
class ParametersAndHeadersTask:
    """A request with optional parameters and additional headers.

    The additional headers are applied before any parameter encoding, so a
    ``Content-Type`` given here is never replaced by an encoder default.
    """

    body_parameters: Optional[Parameters] = None
    url_parameters: Optional[Parameters] = None
    additional_headers: Optional[HTTPHeaders] = None


HTTPTask = Union[PlainTask, ParametersTask, ParametersAndHeadersTask]


@runtime_checkable
class EndPointType(Protocol):
    """Structural contract for anything the router can build a request from."""

    @property
    def path(self) -> str: ...

    @property
    def method(self) -> HTTPMethod: ...

    @property
    def task(self) -> HTTPTask: ...

    @property
    def headers(self) -> Optional[HTTPHeaders]: ...


@dataclass(frozen=True)
class Endpoint:
    """Concrete, immutable endpoint description.

    Examples:
        ```python
        from netlinker import Endpoint, HTTPMethod, ParametersTask

        search = Endpoint(
            path="search",
            method=HTTPMethod.GET,
            task=ParametersTask(url_parameters={"q": "python", "tags": ["a", "b"]}),
        )
        ```
    """

    path: str
    method: HTTPMethod = HTTPMethod.GET
    task: HTTPTask = PlainTask()
    headers: Optional[HTTPHeaders] = None
