"""Request and response value objects shared by the request pipeline."""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from multidict import CIMultiDict, CIMultiDictProxy


@dataclass
class FilePart:
    """
    Opaque file payload for a multipart body.
    
    ``content`` may be a view into a reused read buffer; it is only
    valid until the request carrying it has completed.
    """
    name: str
    filename: str
    content: Union[bytes, bytearray, memoryview]
    content_type: str = 'application/octet-stream'
    
    @property
    def size(self) -> int:
        return len(self.content)


FormValue = Union[str, FilePart]


@dataclass(frozen=True)
class RequestSpec:
    """
    Fully specified request.
    
    Exactly one of ``body`` (JSON text) and ``form`` (ordered multipart
    fields) is set for writes; both are None for reads.
    """
    method: str
    url: str
    headers: CIMultiDict
    query: List[Tuple[str, str]] = field(default_factory=list)
    body: Optional[str] = None
    form: Optional[List[Tuple[str, FormValue]]] = None
    
    @property
    def is_multipart(self) -> bool:
        return self.form is not None
    
    @property
    def file_part(self) -> Optional[FilePart]:
        """First file part of a multipart body, if any."""
        for _, value in self.form or ():
            if isinstance(value, FilePart):
                return value
        return None


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and buffered body of a received response."""
    status: int
    headers: CIMultiDictProxy
    body: bytes = b''
    
    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300
    
    @property
    def content_type(self) -> str:
        return self.headers.get('content-type', '')
    
    def text(self, encoding: str = 'utf-8') -> str:
        return self.body.decode(encoding, errors='replace')
