from enum import Enum
from typing import Optional, Protocol

from ..models.endpoint import Parameters
from ..models.request import RequestDraft
from ._json_encoder import JSONParameterEncoder
from ._url_encoder import URLParameterEncoder


class ParameterEncoder(Protocol):
    """A strategy that embeds a parameter mapping into a request draft."""

    @staticmethod
    def encode(draft: RequestDraft, parameters: Parameters) -> None: ...


class ParameterEncoding(Enum):
    """Selects which encoders apply to a draft.

    ``URL_AND_JSON_ENCODING`` encodes the query first and the body second.
    The router's task dispatch runs them the other way round (body first);
    the two orders are separate code paths and only differ in which encoder
    gets to set ``Content-Type`` when the draft has none.
    """

    URL_ENCODING = "url"
    JSON_ENCODING = "json"
    URL_AND_JSON_ENCODING = "url_and_json"

    def encode(
        self,
        draft: RequestDraft,
        body_parameters: Optional[Parameters] = None,
        url_parameters: Optional[Parameters] = None,
    ) -> None:
        match self:
            case ParameterEncoding.URL_ENCODING:
                if url_parameters is None:
                    return
                URLParameterEncoder.encode(draft, url_parameters)
            case ParameterEncoding.JSON_ENCODING:
                if body_parameters is None:
                    return
                JSONParameterEncoder.encode(draft, body_parameters)
            case ParameterEncoding.URL_AND_JSON_ENCODING:
                if url_parameters is not None:
                    URLParameterEncoder.encode(draft, url_parameters)
                if body_parameters is not None:
                    JSONParameterEncoder.encode(draft, body_parameters)
