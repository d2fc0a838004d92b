import dataclasses
import logging
from typing import Any, Optional

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..models.endpoint import Parameters
from ..models.errors import ParametersNilError

logger = logging.getLogger(__name__)


def as_parameters(model: Any) -> dict[str, Any]:
    """Convert a model into a JSON-compatible parameter dict.

    Pydantic models are dumped by alias; dataclass instances go through the
    same JSON conversion. Conversion failures are logged and yield an empty
    dict, so callers should treat ``{}`` as "nothing to send".

    Args:
        model: A pydantic model or dataclass instance.

    Returns:
        The parameters, or ``{}`` if the model cannot be represented as a
        JSON object.

    Examples:
        ```python
        class User(BaseModel):
            id: int
            name: str

        as_parameters(User(id=1, name="John Doe"))
        # {"id": 1, "name": "John Doe"}
        ```
    """
    try:
        if isinstance(model, BaseModel):
            data = model.model_dump(mode="json", by_alias=True)
        elif dataclasses.is_dataclass(model) and not isinstance(model, type):
            data = to_jsonable_python(model)
        else:
            raise TypeError(f"Unsupported model type: {type(model).__name__}")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        logger.warning(f"Failed to convert {type(model).__name__} to parameters: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"{type(model).__name__} did not convert to a JSON object")
        return {}
    return data


def require_parameters(parameters: Optional[Parameters]) -> Parameters:
    """Return ``parameters`` unchanged, raising if there are none.

    Raises:
        ParametersNilError: If ``parameters`` is ``None`` or empty.
    """
    if not parameters:
        raise ParametersNilError()
    return parameters
