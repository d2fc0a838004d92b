from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import httpx

from .._utils.constants import (
    DEFAULT_TIMEOUT_INTERVAL,
    HEADER_CACHE_CONTROL,
    NO_CACHE,
)


class CachePolicy(str, Enum):
    USE_PROTOCOL_CACHE = "use_protocol_cache"
    RELOAD_IGNORING_LOCAL_AND_REMOTE_CACHE = "reload_ignoring_local_and_remote_cache"


@dataclass
class RequestDraft:
    """The in-progress outbound request.

    A draft is owned by a single build call. Encoders mutate it in place and
    the router hands it back to the caller once every step has succeeded.

    Attributes:
        url: Absolute request URL, ``None`` until the router resolves it.
        method: HTTP method wire name.
        headers: Case-insensitive header mapping.
        body: Raw request body, if any.
        timeout: Timeout hint in seconds for the transport.
        cache_policy: Cache directive for the transport.
    """

    url: Optional[httpx.URL] = None
    method: str = "GET"
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: Optional[bytes] = None
    timeout: float = DEFAULT_TIMEOUT_INTERVAL
    cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_CACHE

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name)

    def set_header_if_missing(self, name: str, value: str) -> None:
        if name not in self.headers:
            self.headers[name] = value

    def add_header(self, name: str, value: str) -> None:
        """Add a header value, comma-joining it onto an existing one."""
        existing = self.headers.get(name)
        self.headers[name] = value if existing is None else f"{existing},{value}"

    def to_httpx_request(self) -> httpx.Request:
        """Convert the draft into an ``httpx.Request`` a transport can send.

        Raises:
            ValueError: If the draft has no URL.
        """
        if self.url is None:
            raise ValueError("Cannot create a request from a draft without a URL")

        headers = httpx.Headers(self.headers)
        if (
            self.cache_policy == CachePolicy.RELOAD_IGNORING_LOCAL_AND_REMOTE_CACHE
            and HEADER_CACHE_CONTROL not in headers
        ):
            headers[HEADER_CACHE_CONTROL] = NO_CACHE

        return httpx.Request(
            self.method,
            self.url,
            headers=headers,
            content=self.body,
            extensions={"timeout": httpx.Timeout(self.timeout).as_dict()},
        )
