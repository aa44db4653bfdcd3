"""
JSON deserialization with optional root property extraction.

Most Fitbit endpoints nest their payload under a top-level key
({"user": {...}}, {"fat": [...]}, {"activities-steps": [...]}),
others return it at the document root.
"""

import json
from typing import Any, Callable, List, Optional, TypeVar

T = TypeVar("T")


class JsonSerializer:
    """Decode a response body, optionally from under a named top-level property."""

    def __init__(self, root_property: Optional[str] = None):
        self.root_property = root_property

    def _load(self, body: str) -> Any:
        data = json.loads(body)
        if self.root_property is None:
            return data
        if not isinstance(data, dict) or self.root_property not in data:
            raise ValueError(f"Root property '{self.root_property}' not found in response")
        return data[self.root_property]

    def deserialize(self, body: str, factory: Optional[Callable[[Any], T]] = None) -> Any:
        """
        Decode the body (or its root property) and optionally build a model from it.

        Raises:
            json.JSONDecodeError: If the body is not valid JSON
            ValueError: If the root property is missing
        """
        data = self._load(body)
        if factory is None:
            return data
        return factory(data)

    def deserialize_list(self, body: str, factory: Callable[[Any], T]) -> List[T]:
        """Decode a JSON array (or an array under the root property) into a list of models."""
        data = self._load(body)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
        return [factory(item) for item in data]
