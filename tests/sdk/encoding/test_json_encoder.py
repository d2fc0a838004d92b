import json

import httpx
import pytest

from netlinker import EncodingFailedError, JSONParameterEncoder, RequestDraft


@pytest.fixture
def draft() -> RequestDraft:
    return RequestDraft(url=httpx.URL("https://api.example.com/v1/users"), method="POST")


class TestJSONParameterEncoder:
    def test_encodes_body(self, draft: RequestDraft):
        JSONParameterEncoder.encode(draft, {"name": "x"})

        assert draft.body is not None
        assert json.loads(draft.body) == {"name": "x"}
        assert draft.headers["Content-Type"] == "application/json"

    def test_nested_values(self, draft: RequestDraft):
        parameters = {
            "name": "Zoë",
            "age": 30,
            "active": True,
            "nickname": None,
            "tags": ["a", ["b", 1.5]],
        }

        JSONParameterEncoder.encode(draft, parameters)

        assert draft.body is not None
        assert json.loads(draft.body.decode("utf-8")) == parameters

    def test_does_not_touch_url(self, draft: RequestDraft):
        JSONParameterEncoder.encode(draft, {"name": "x"})

        assert str(draft.url) == "https://api.example.com/v1/users"

    def test_works_without_url(self):
        draft = RequestDraft()

        JSONParameterEncoder.encode(draft, {"name": "x"})

        assert draft.body is not None

    def test_keeps_existing_content_type(self, draft: RequestDraft):
        draft.headers["Content-Type"] = "application/vnd.api+json"

        JSONParameterEncoder.encode(draft, {"name": "x"})

        assert draft.headers["Content-Type"] == "application/vnd.api+json"

    @pytest.mark.parametrize(
        "parameters",
        [
            {"value": object()},
            {"value": {1, 2}},
            {"value": float("inf")},
            {"value": float("nan")},
            ["not", "a", "mapping"],
        ],
    )
    def test_unencodable_parameters(self, draft: RequestDraft, parameters):
        with pytest.raises(EncodingFailedError) as exc_info:
            JSONParameterEncoder.encode(draft, parameters)

        assert exc_info.value.message == "Parameters encoding failed."
        assert draft.body is None
        assert "Content-Type" not in draft.headers
