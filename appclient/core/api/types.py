"""Type aliases for decoded JSON payloads."""
from typing import Any, Callable, Dict, List, TypeVar, Union

# Decoded JSON: None | bool | int | float | str | list | dict
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
JsonMap = Dict[str, JsonValue]

T = TypeVar('T')

Converter = Callable[[JsonMap], T]
