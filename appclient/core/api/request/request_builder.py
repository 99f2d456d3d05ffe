"""Request builder for API calls."""
from typing import Any, Dict, List, Mapping, Optional, Tuple

from multidict import CIMultiDict

from ..json_codec import JsonCodec
from .models import FilePart, FormValue, RequestSpec


MULTIPART_FORM = 'multipart/form-data'
JSON_CONTENT_TYPE = 'application/json'


def stringify(value: Any) -> str:
    """Canonical text form of a scalar parameter value."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class RequestBuilder:
    """
    Builds requests from method, path, headers and parameters.
    
    Reads put every parameter in the query string, multipart writes
    produce ordered form fields, all other writes get a JSON body.
    Sequence values become repeated ``key[]`` entries in both the
    query string and the form.
    """
    
    def __init__(self, endpoint: str, codec: Optional[JsonCodec] = None):
        self.endpoint = endpoint.rstrip('/')
        self.codec = codec or JsonCodec()
    
    def build(
        self,
        method: str,
        path: str,
        base_headers: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None
    ) -> RequestSpec:
        """
        Build a request.
        
        Args:
            method: HTTP method
            path: Path relative to the endpoint
            base_headers: Persistent client headers
            headers: Per-call headers, winning on key collision
            params: Parameters; None values are dropped
            
        Returns:
            Request ready for the transport
        """
        method = method.upper()
        merged = self.build_headers(base_headers, headers)
        filtered = self.filter_params(params)
        url = self.build_url(path)
        
        if method == 'GET':
            return RequestSpec(
                method=method,
                url=url,
                headers=merged,
                query=self.build_query(filtered)
            )
        
        if merged.get('content-type') == MULTIPART_FORM:
            return RequestSpec(
                method=method,
                url=url,
                headers=merged,
                form=self.build_form(filtered)
            )
        
        merged['content-type'] = JSON_CONTENT_TYPE
        return RequestSpec(
            method=method,
            url=url,
            headers=merged,
            body=self.codec.encode(filtered)
        )
    
    def build_url(self, path: str) -> str:
        return f"{self.endpoint}{path}"
    
    @staticmethod
    def build_headers(
        base_headers: Optional[Mapping[str, str]],
        headers: Optional[Mapping[str, str]]
    ) -> CIMultiDict:
        """Merge persistent and per-call headers case-insensitively."""
        merged: CIMultiDict = CIMultiDict()
        for source in (base_headers or {}, headers or {}):
            for key, value in source.items():
                merged[key] = value
        return merged
    
    @staticmethod
    def filter_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        return {k: v for k, v in (params or {}).items() if v is not None}
    
    @staticmethod
    def build_query(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
        query: List[Tuple[str, str]] = []
        for key, value in params.items():
            if _is_sequence(value):
                query.extend((f"{key}[]", stringify(item)) for item in value)
            else:
                query.append((key, stringify(value)))
        return query
    
    @staticmethod
    def build_form(params: Mapping[str, Any]) -> List[Tuple[str, FormValue]]:
        form: List[Tuple[str, FormValue]] = []
        for key, value in params.items():
            if key == 'file' or isinstance(value, FilePart):
                if not isinstance(value, FilePart):
                    raise TypeError(
                        f"Parameter '{key}' must be a FilePart, got {type(value).__name__}"
                    )
                form.append((key, value))
            elif _is_sequence(value):
                form.extend((f"{key}[]", stringify(item)) for item in value)
            else:
                form.append((key, stringify(value)))
        return form
