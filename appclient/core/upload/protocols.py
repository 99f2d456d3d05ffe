"""
Protocol definitions for upload module.

The coordinator depends on these instead of concrete classes so tests
and alternative clients can be plugged in.
"""
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol, Union

from ..api.types import Converter
from .models import UploadProgress


ProgressCallback = Callable[[UploadProgress], Union[None, Awaitable[None]]]


class RequesterProtocol(Protocol):
    """Anything that can perform a single API call."""
    
    async def call(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
        response_type: type = dict,
        convert: Optional[Converter] = None
    ) -> Any:
        ...
