import threading
from logging import getLogger
from typing import Generic, Optional, TypeVar

import httpx

from .._config import ApiServer
from .._utils.constants import CONTENT_TYPE_JSON, HEADER_CONTENT_TYPE
from ..encoding import JSONParameterEncoder, URLParameterEncoder
from ..models.endpoint import (
    EndPointType,
    HTTPHeaders,
    Parameters,
    ParametersAndHeadersTask,
    ParametersTask,
    PlainTask,
)
from ..models.errors import (
    InvalidBaseURLError,
    InvalidPathError,
    RequestBuildError,
    UnsupportedTaskError,
)
from ..models.request import CachePolicy, RequestDraft
from ._network_router import Completion, TaskHandle, Transport

E = TypeVar("E", bound=EndPointType)

logger = getLogger(__name__)


def _append_path_component(url: httpx.URL, component: str) -> httpx.URL:
    if not component:
        return url
    # work on the escaped path so existing escapes such as %2F survive the join
    path = url.raw_path.decode("ascii").partition("?")[0]
    if not path.endswith("/"):
        path += "/"
    if component.startswith("/"):
        component = component[1:]
    try:
        return url.copy_with(path=path + component)
    except httpx.InvalidURL as e:
        raise InvalidPathError() from e


def _parse_base_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidBaseURLError() from e
    if not url.is_absolute_url:
        raise InvalidBaseURLError()
    return url


class Router(Generic[E]):
    """Builds request drafts for endpoints of type ``E``.

    Every build works on a fresh draft, so one router can build many requests
    concurrently. The only instance state is the handle of the last request
    handed to a transport through :meth:`send`, which is lock-protected.
    """

    def __init__(self, task: Optional[TaskHandle] = None) -> None:
        self._task = task
        self._task_lock = threading.Lock()

    @property
    def task(self) -> Optional[TaskHandle]:
        with self._task_lock:
            return self._task

    def request(self, api_server: ApiServer, route: E) -> Optional[RequestDraft]:
        """Build the request for ``route``, or return ``None`` if that fails.

        Use :meth:`build_request` to get the failure reason instead.
        """
        try:
            return self.build_request(api_server, route)
        except RequestBuildError as e:
            logger.debug(f"Failed to build request for '{route.path}': {e}")
            return None

    def build_request(self, api_server: ApiServer, route: E) -> RequestDraft:
        """Build the request for ``route`` against ``api_server``.

        The URL is ``base_url``, then ``version``, then ``route.path``, joined
        as path components.

        Args:
            api_server: Supplies the base URL and API version.
            route: The endpoint to build.

        Returns:
            The completed request draft.

        Raises:
            InvalidBaseURLError: If the base URL is not an absolute URL.
            InvalidPathError: If the version or path cannot form a URL path.
            EncodingFailedError: If parameters cannot be encoded.
            MissingURLError: If query encoding runs without a URL.
            UnsupportedTaskError: If the endpoint task is not a known variant.
        """
        url = _parse_base_url(api_server.base_url)
        url = _append_path_component(url, api_server.version)
        url = _append_path_component(url, route.path)

        draft = RequestDraft(
            url=url,
            method=route.method.value,
            cache_policy=CachePolicy.RELOAD_IGNORING_LOCAL_AND_REMOTE_CACHE,
        )

        match route.task:
            case PlainTask():
                draft.add_header(HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON)
            case ParametersTask(body_parameters=body, url_parameters=query):
                self._configure_parameters(draft, body, query)
            case ParametersAndHeadersTask(
                body_parameters=body,
                url_parameters=query,
                additional_headers=additional_headers,
            ):
                self._add_additional_headers(draft, additional_headers)
                self._configure_parameters(draft, body, query)
            case _:
                raise UnsupportedTaskError(f"Unsupported task: {route.task!r}")

        logger.debug(f"Request: {draft.method} {draft.url}")
        return draft

    def send(
        self,
        api_server: ApiServer,
        route: E,
        transport: Transport,
        completion: Completion,
    ) -> Optional[TaskHandle]:
        """Build the request and hand it to ``transport``.

        The handle the transport returns becomes :attr:`task`. If the request
        cannot be built, ``completion`` receives the error and nothing is sent.
        """
        try:
            draft = self.build_request(api_server, route)
        except RequestBuildError as e:
            completion(None, None, e)
            return None

        handle = transport.send(draft.to_httpx_request(), completion)
        with self._task_lock:
            self._task = handle
        return handle

    def cancel(self) -> None:
        """Cancel the transport operation started by the last :meth:`send`."""
        with self._task_lock:
            task, self._task = self._task, None
        if task is not None:
            task.cancel()

    def _configure_parameters(
        self,
        draft: RequestDraft,
        body_parameters: Optional[Parameters],
        url_parameters: Optional[Parameters],
    ) -> None:
        # body first: its Content-Type wins when both are present
        if body_parameters is not None:
            JSONParameterEncoder.encode(draft, body_parameters)
        if url_parameters is not None:
            URLParameterEncoder.encode(draft, url_parameters)

    def _add_additional_headers(
        self, draft: RequestDraft, additional_headers: Optional[HTTPHeaders]
    ) -> None:
        if additional_headers is None:
            return
        for key, value in additional_headers.items():
            draft.add_header(key, value)
