"""Serialization helpers for the Gotify wire bodies."""

from typing import Any
from typing import Dict
from typing import List
from typing import Type
from typing import TypeAlias
from typing import TypeVar

from pydantic import BaseModel

JsonDict: TypeAlias = Dict[str, Any]

T = TypeVar("T", bound=BaseModel)


def serialize_model(model: BaseModel) -> JsonDict:
    """
    Serialize a Pydantic model to a dictionary keyed by the API's field names.

    Args:
        model: The Pydantic model to serialize

    Returns:
        A dictionary representation using field aliases
    """
    if not isinstance(model, BaseModel):
        raise TypeError(f"Expected Pydantic model, got {type(model).__name__}")

    return model.model_dump(by_alias=True)


def deserialize_model(data: Any, model_class: Type[T]) -> T:
    """
    Deserialize decoded JSON into a Pydantic model.

    Raises:
        ValueError: If the data does not match the model
    """
    if not isinstance(data, dict):
        raise ValueError(f"Failed to deserialize {model_class.__name__}: expected an object, got {type(data).__name__}")
    try:
        return model_class.model_validate(data)
    except Exception as e:
        raise ValueError(f"Failed to deserialize {model_class.__name__}: {str(e)}")


def deserialize_model_list(data: Any, model_class: Type[T]) -> List[T]:
    """
    Deserialize a decoded JSON array into a list of Pydantic models, keeping its order.

    Raises:
        ValueError: If the data is not an array or an element does not match the model
    """
    if data is None:
        return []

    if not isinstance(data, list):
        raise ValueError(f"Failed to deserialize list of {model_class.__name__}: got {type(data).__name__}")

    return [deserialize_model(item, model_class) for item in data]
