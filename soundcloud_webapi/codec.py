"""
JSON codec for SoundCloud resources.

Decodes response payloads into the pydantic models and encodes request
bodies back into the API's snake_case JSON shape.
"""

import logging
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import DecodeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class SoundCloudCodec:
    """Converts between JSON payloads and SoundCloud models."""

    def __init__(self):
        self._list_adapters: Dict[type, TypeAdapter] = {}

    def decode(self, payload: Any, model: Type[ModelT]) -> ModelT:
        """
        Decode a single resource.

        Args:
            payload: Parsed JSON (expected to be an object).
            model: Model class to decode into.

        Returns:
            Model instance.

        Raises:
            DecodeError: If the payload does not match the model.
        """
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Expected a JSON object for {model.__name__}, "
                f"got {type(payload).__name__}"
            )
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.debug("Failed to decode %s: %s", model.__name__, e)
            raise DecodeError(f"Invalid {model.__name__} payload: {e}") from e

    def decode_list(self, payload: Any, model: Type[ModelT]) -> List[ModelT]:
        """
        Decode an ordered collection of resources.

        Raises:
            DecodeError: If the payload is not a list of matching objects.
        """
        if not isinstance(payload, list):
            raise DecodeError(
                f"Expected a JSON array of {model.__name__}, "
                f"got {type(payload).__name__}"
            )
        adapter = self._list_adapters.get(model)
        if adapter is None:
            adapter = TypeAdapter(List[model])
            self._list_adapters[model] = adapter
        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            logger.debug("Failed to decode list of %s: %s", model.__name__, e)
            raise DecodeError(
                f"Invalid {model.__name__} list payload: {e}"
            ) from e

    @staticmethod
    def encode(resource: BaseModel) -> Dict[str, Any]:
        """Encode a model as a JSON-ready dict, dropping unset (None) fields."""
        return resource.model_dump(mode="json", exclude_none=True)
