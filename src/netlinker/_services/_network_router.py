from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Protocol

import httpx

from .._config import ApiServer
from ..models.endpoint import EndPointType
from ..models.request import RequestDraft


@dataclass(frozen=True)
class StatusInfo:
    """Status line details a transport reports back on completion."""

    code: int
    headers: Mapping[str, str] = field(default_factory=dict)


Completion = Callable[
    [Optional[bytes], Optional[StatusInfo], Optional[Exception]], None
]


class TaskHandle(Protocol):
    """Handle to an in-flight transport operation."""

    def cancel(self) -> None: ...


class Transport(Protocol):
    """Executes built requests. Implemented outside this package."""

    def send(self, request: httpx.Request, completion: Completion) -> TaskHandle: ...


class NetworkRouter(Protocol):
    """Anything that can turn a server config and an endpoint into a request."""

    def request(
        self, api_server: ApiServer, route: EndPointType
    ) -> Optional[RequestDraft]: ...
