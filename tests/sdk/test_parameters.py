import json
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

import pytest
from pydantic import BaseModel, Field, RootModel

from netlinker import (
    Endpoint,
    HTTPMethod,
    ParametersNilError,
    ParametersTask,
    Router,
    ServerConfig,
    as_parameters,
    require_parameters,
)


class User(BaseModel):
    id: int
    name: str
    display_name: Optional[str] = Field(None, alias="displayName")
    joined: date


@dataclass
class Filter:
    status: str
    tags: list[str]


class TestAsParameters:
    def test_pydantic_model_by_alias(self):
        user = User(id=1, name="John Doe", displayName="John", joined=date(2024, 3, 22))

        assert as_parameters(user) == {
            "id": 1,
            "name": "John Doe",
            "displayName": "John",
            "joined": "2024-03-22",
        }

    def test_dataclass(self):
        assert as_parameters(Filter(status="open", tags=["a", "b"])) == {
            "status": "open",
            "tags": ["a", "b"],
        }

    def test_unsupported_type_returns_empty(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.WARNING, logger="netlinker")

        assert as_parameters(object()) == {}
        assert "Failed to convert object to parameters" in caplog.text

    def test_non_object_model_returns_empty(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.WARNING, logger="netlinker")

        assert as_parameters(RootModel[list[int]]([1, 2])) == {}
        assert "did not convert to a JSON object" in caplog.text

    def test_feeds_json_body(self, router: Router, server: ServerConfig):
        user = User(id=1, name="John Doe", joined=date(2024, 3, 22))

        draft = router.build_request(
            server,
            Endpoint(
                path="users",
                method=HTTPMethod.POST,
                task=ParametersTask(body_parameters=as_parameters(user)),
            ),
        )

        assert draft.body is not None
        assert json.loads(draft.body)["joined"] == "2024-03-22"


class TestRequireParameters:
    def test_returns_parameters(self):
        parameters = {"q": "x"}

        assert require_parameters(parameters) is parameters

    @pytest.mark.parametrize("parameters", [None, {}])
    def test_missing_parameters(self, parameters):
        with pytest.raises(ParametersNilError) as exc_info:
            require_parameters(parameters)

        assert exc_info.value.message == "Parameters are nil."
