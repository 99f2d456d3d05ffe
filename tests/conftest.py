"""Pytest fixtures for appclient tests."""
import json
from dataclasses import dataclass
from typing import Callable, List, Optional

import pytest
from multidict import CIMultiDict, CIMultiDictProxy

from appclient.core.api import ClientConfig, RawResponse, RequestSpec


def make_response(
    status: int = 200,
    body: bytes = b'',
    content_type: Optional[str] = 'application/json'
) -> RawResponse:
    headers = CIMultiDict()
    if content_type:
        headers['Content-Type'] = content_type
    return RawResponse(status=status, headers=CIMultiDictProxy(headers), body=body)


def json_response(data, status: int = 200) -> RawResponse:
    return make_response(status, json.dumps(data).encode())


@dataclass
class RecordedRequest:
    """Request as seen by the transport, with the file bytes copied."""
    spec: RequestSpec
    file_bytes: Optional[bytes]
    
    @property
    def headers(self):
        return self.spec.headers


class FakeTransport:
    """
    Recording transport.
    
    Answers from a queue of responses, or from ``handler(spec, index)``
    when one is set.
    """
    
    def __init__(self, responses: Optional[List[RawResponse]] = None):
        self.requests: List[RecordedRequest] = []
        self.responses = list(responses or [])
        self.handler: Optional[Callable[[RequestSpec, int], RawResponse]] = None
        self.closed = False
    
    async def execute(self, request: RequestSpec) -> RawResponse:
        part = request.file_part
        self.requests.append(
            RecordedRequest(spec=request, file_bytes=bytes(part.content) if part else None)
        )
        if self.handler is not None:
            return self.handler(request, len(self.requests) - 1)
        return self.responses.pop(0)
    
    async def close(self) -> None:
        self.closed = True


def chunk_server(resource_id: str = 'file123', chunk_total: int = 0, fail_at: Optional[int] = None):
    """Handler answering chunk requests like the storage endpoint."""
    def handler(request: RequestSpec, index: int) -> RawResponse:
        if fail_at is not None and index == fail_at:
            return json_response(
                {'message': 'Storage limit exceeded', 'code': 507, 'type': 'storage_limit'},
                status=507
            )
        return json_response({
            '$id': resource_id,
            'name': 'upload.bin',
            'bucketId': 'bucket',
            'chunkTotal': chunk_total,
            'chunkUploaded': index + 1,
        })
    return handler


@pytest.fixture
def transport():
    """Recording fake transport."""
    return FakeTransport()


@pytest.fixture
def config():
    """Config with a small chunk size."""
    return ClientConfig(endpoint='https://api.example.com/v1', chunk_size=1024)


@pytest.fixture
def make_file(tmp_path):
    """Factory writing a file of ``size`` patterned bytes."""
    def _make(size: int, name: str = 'upload.bin'):
        path = tmp_path / name
        path.write_bytes(bytes(i % 251 for i in range(size)))
        return path
    return _make


@pytest.fixture
def respond():
    """``respond(data, status=200)`` builds a JSON response."""
    return json_response


@pytest.fixture
def raw_response():
    """``raw_response(status, body, content_type)`` builds any response."""
    return make_response


@pytest.fixture
def server():
    """``server(resource_id, chunk_total, fail_at)`` builds a chunk endpoint handler."""
    return chunk_server
