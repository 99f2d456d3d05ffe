"""
JSON encoding and decoding for request and response bodies.

Python's json module keeps integers as arbitrary precision ``int`` and
floats as ``float`` (shortest round-trip repr). ``Decimal`` values are
written digit for digit as JSON numbers, and decoding can optionally
read every non-integer number as ``Decimal``.
"""
import json
import re
import uuid
from decimal import Decimal
from typing import Any, Mapping

from ..exceptions import DecodeError
from .types import JsonMap


class PreciseJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that writes ``Decimal`` values verbatim.

    Each Decimal is first emitted as a string marker unique to the
    encode call, then the quoted marker is replaced by the digits.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._marker = uuid.uuid4().hex
        self._pattern = re.compile(rf'"{self._marker}:([^"]+)"')

    def default(self, o: Any) -> Any:
        if isinstance(o, Decimal):
            if not o.is_finite():
                raise ValueError(f"Out of range Decimal value is not JSON compliant: {o}")
            return f"{self._marker}:{o}"
        return super().default(o)

    def encode(self, o: Any) -> str:
        return self._pattern.sub(lambda m: m.group(1), super().encode(o))


class JsonCodec:
    """
    Encodes parameter maps and decodes response bodies.

    Args:
        use_decimal: Decode non-integer numbers as ``Decimal`` instead of ``float``
    """

    def __init__(self, use_decimal: bool = False):
        self.use_decimal = use_decimal

    def encode(self, data: Mapping[str, Any]) -> str:
        """Serialize a mapping to JSON text."""
        return json.dumps(data, cls=PreciseJSONEncoder)

    def decode(self, body: str) -> JsonMap:
        """
        Decode a JSON object.

        Args:
            body: Response body text

        Returns:
            Decoded mapping

        Raises:
            DecodeError: If the body is not valid JSON or not an object
        """
        try:
            value = json.loads(body, parse_float=Decimal if self.use_decimal else None)
        except ValueError as e:
            raise DecodeError(f"Invalid JSON response: {e}", body) from e
        if not isinstance(value, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(value).__name__}", body
            )
        return value
