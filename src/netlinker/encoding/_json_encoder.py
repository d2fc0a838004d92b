import json
from collections.abc import Mapping

from .._utils.constants import CONTENT_TYPE_JSON, HEADER_CONTENT_TYPE
from ..models.endpoint import Parameters
from ..models.errors import EncodingFailedError
from ..models.request import RequestDraft


class JSONParameterEncoder:
    """Encodes parameters as a JSON object into the request body."""

    @staticmethod
    def encode(draft: RequestDraft, parameters: Parameters) -> None:
        """Serialize ``parameters`` to JSON and set it as the draft body.

        ``Content-Type: application/json`` is added only when the draft has no
        content type yet.

        Args:
            draft: The request draft to modify in place.
            parameters: A mapping that must be representable as a JSON object.

        Raises:
            EncodingFailedError: If the parameters are not a mapping or contain
                values JSON cannot represent (including NaN and infinities).
        """
        if not isinstance(parameters, Mapping):
            raise EncodingFailedError()

        try:
            body = json.dumps(dict(parameters), allow_nan=False)
        except (TypeError, ValueError) as e:
            raise EncodingFailedError() from e

        draft.body = body.encode("utf-8")
        draft.set_header_if_missing(HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON)
