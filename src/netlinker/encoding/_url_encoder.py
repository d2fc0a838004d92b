import json
from typing import Any

from .._utils.constants import CONTENT_TYPE_FORM_URLENCODED, HEADER_CONTENT_TYPE
from ..models.endpoint import Parameters
from ..models.errors import EncodingFailedError, MissingURLError
from ..models.request import RequestDraft


def stringify(value: Any) -> str:
    """Render a scalar parameter value the way it appears in a query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


class URLParameterEncoder:
    """Encodes parameters into the query string of the draft URL.

    List values are sent as repeated ``key[]`` items, one per element, in
    list order. Items are appended after any query the URL already has.
    """

    @staticmethod
    def encode(draft: RequestDraft, parameters: Parameters) -> None:
        """Append ``parameters`` to the draft URL query.

        Adds ``Content-Type: application/x-www-form-urlencoded; charset=utf-8``
        when the draft has no content type yet.

        Raises:
            MissingURLError: If the draft has no URL.
            EncodingFailedError: If a nested value cannot be rendered.
        """
        if draft.url is None:
            raise MissingURLError()

        if parameters:
            params = draft.url.params
            try:
                for key, value in parameters.items():
                    if isinstance(value, (list, tuple)):
                        for item in value:
                            params = params.add(f"{key}[]", stringify(item))
                    else:
                        params = params.add(key, stringify(value))
            except (TypeError, ValueError) as e:
                raise EncodingFailedError() from e
            draft.url = draft.url.copy_with(params=params)

        draft.set_header_if_missing(HEADER_CONTENT_TYPE, CONTENT_TYPE_FORM_URLENCODED)
