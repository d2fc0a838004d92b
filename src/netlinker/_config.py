import os
from enum import Enum
from typing import Mapping, Optional, Protocol

from dotenv import load_dotenv
from pydantic import BaseModel

from ._utils.constants import ENV_API_VERSION, ENV_BASE_URL, ENV_ENVIRONMENT
from .models.errors import BaseUrlMissingError


class Environment(str, Enum):
    """Running environment, used to pick a server configuration."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"

    @classmethod
    def current(cls) -> "Environment":
        value = os.getenv(ENV_ENVIRONMENT, cls.PRODUCTION.value)
        return cls(value.strip().lower())


class ApiServer(Protocol):
    """Where requests are routed: a base URL and an API version."""

    base_url: str
    version: str


class ServerConfig(BaseModel):
    """Server configuration consumed by the router.

    The base URL is deliberately not validated here. The router checks it
    when a request is built and raises ``InvalidBaseURLError`` then.
    """

    base_url: str
    version: str = ""

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Build a configuration from ``NETLINKER_BASE_URL`` and ``NETLINKER_API_VERSION``.

        A ``.env`` file in the working directory is loaded first.

        Raises:
            BaseUrlMissingError: If no base URL is configured.
        """
        load_dotenv()

        base_url = os.getenv(ENV_BASE_URL)
        if not base_url:
            raise BaseUrlMissingError()
        return cls(base_url=base_url, version=os.getenv(ENV_API_VERSION, ""))


class ApiServerFactory(Protocol):
    def create(self) -> ApiServer: ...


class EnvironmentFactory(Protocol):
    def create(self) -> ApiServer: ...


class EnvironmentServerFactory:
    """Returns the server configuration registered for an environment."""

    def __init__(
        self,
        servers: Mapping[Environment, ServerConfig],
        environment: Optional[Environment] = None,
    ) -> None:
        self._servers = dict(servers)
        self._environment = environment

    @property
    def environment(self) -> Environment:
        return self._environment or Environment.current()

    def create(self) -> ServerConfig:
        environment = self.environment
        server = self._servers.get(environment)
        if server is None:
            raise LookupError(
                f"No server configuration registered for environment '{environment.value}'."
            )
        return server.model_copy()
