from logging import getLogger
from typing import Generic, Optional, TypeVar

from ._config import ApiServer, ServerConfig
from ._services.router import Router
from ._utils._logs import setup_logging
from .models.endpoint import EndPointType
from .models.request import RequestDraft

E = TypeVar("E", bound=EndPointType)


class NetLinker(Generic[E]):
    """Entry point tying a server configuration to endpoints of type ``E``.

    Examples:
        ```python
        from netlinker import Endpoint, NetLinker, ServerConfig

        linker = NetLinker[Endpoint](
            ServerConfig(base_url="https://api.example.com", version="v1")
        )
        draft = linker.build_request(Endpoint(path="users"))
        ```
    """

    def __init__(self, api_server: ApiServer) -> None:
        self.api_server = api_server

    @classmethod
    def from_env(cls, *, debug: bool = False) -> "NetLinker[E]":
        """Create a manager configured from ``NETLINKER_*`` environment variables."""
        setup_logging(debug)
        api_server = ServerConfig.from_env()

        log = getLogger("netlinker")
        log.debug("CONFIG:")
        log.debug(f"{api_server.model_dump()}\n")

        return cls(api_server)

    @property
    def router(self) -> Router[E]:
        return Router()

    def build_request(self, endpoint: E) -> RequestDraft:
        return self.router.build_request(self.api_server, endpoint)

    def request(self, endpoint: E) -> Optional[RequestDraft]:
        return self.router.request(self.api_server, endpoint)
