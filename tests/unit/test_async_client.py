"""Tests for the async API client."""
import asyncio
import logging
from decimal import Decimal

import pytest

from appclient.core.api import AsyncAPIClient, ClientConfig, RESPONSE_FORMAT
from appclient.core.exceptions import ApiError, TransportError


class TestAsyncAPIClientHeaders:
    """Test suite for persistent headers."""
    
    def test_default_headers(self, config, transport):
        """Test identity and format headers are always present."""
        api = AsyncAPIClient(config, transport, sdk_version='1.2.3')
        
        assert api.headers == {
            'content-type': 'application/json',
            'x-sdk-version': 'appclient:python:1.2.3',
            'x-appwrite-response-format': RESPONSE_FORMAT,
        }
    
    def test_extra_headers_from_config(self, transport):
        """Test configured extra headers join the persistent set."""
        config = ClientConfig(extra_headers={'x-custom': 'yes'})
        api = AsyncAPIClient(config, transport)
        
        assert api.headers['x-custom'] == 'yes'
    
    def test_add_header_replaces_case_insensitively(self, config, transport):
        """Test a header set twice with different case is stored once."""
        api = AsyncAPIClient(config, transport)
        api.add_header('X-Appwrite-Project', 'one')
        api.add_header('x-appwrite-project', 'two')
        
        matching = [k for k in api.headers if k.lower() == 'x-appwrite-project']
        assert matching == ['x-appwrite-project']
        assert api.headers['x-appwrite-project'] == 'two'
    
    def test_headers_is_snapshot(self, config, transport):
        """Test mutating the returned dict leaves the client untouched."""
        api = AsyncAPIClient(config, transport)
        snapshot = api.headers
        snapshot['x-evil'] = '1'
        
        assert 'x-evil' not in api.headers
    
    def test_set_self_signed_resets_transport(self, config):
        """Test switching TLS mode asks the transport to rebuild."""
        class ResettableTransport:
            reset_calls = 0
            
            def reset(self):
                self.reset_calls += 1
        
        transport = ResettableTransport()
        api = AsyncAPIClient(config, transport)
        api.set_self_signed(True)
        
        assert config.ssl.verify is False
        assert transport.reset_calls == 1


class TestAsyncAPIClientCall:
    """Test suite for AsyncAPIClient.call."""
    
    @pytest.mark.asyncio
    async def test_call_sends_merged_headers(self, config, transport, respond):
        """Test per-call headers override persistent ones on the wire."""
        transport.responses.append(respond({'ok': True}))
        api = AsyncAPIClient(config, transport)
        api.add_header('x-appwrite-locale', 'en')
        
        result = await api.call('GET', '/locale', headers={'X-Appwrite-Locale': 'fr'})
        
        sent = transport.requests[0].headers
        assert result == {'ok': True}
        assert sent.getall('x-appwrite-locale') == ['fr']
        assert sent['x-appwrite-response-format'] == RESPONSE_FORMAT
    
    @pytest.mark.asyncio
    async def test_call_uses_endpoint(self, config, transport, respond):
        """Test the request URL is endpoint plus path."""
        transport.responses.append(respond({}))
        api = AsyncAPIClient(config, transport)
        api.endpoint = 'https://other.example.com/v2/'
        
        await api.call('GET', '/health')
        
        assert transport.requests[0].spec.url == 'https://other.example.com/v2/health'
    
    @pytest.mark.asyncio
    async def test_decimal_numbers_round_trip(self, transport, raw_response):
        """Test decimal mode keeps prices exact in both directions."""
        transport.responses.append(raw_response(200, b'{"price": 0.10000000000000000001, "n": 3}'))
        api = AsyncAPIClient(ClientConfig(decimal_numbers=True), transport)
        
        data = await api.call('POST', '/orders', params={'price': Decimal('0.10000000000000000001')})
        
        assert transport.requests[0].spec.body == '{"price": 0.10000000000000000001}'
        assert data == {'price': Decimal('0.10000000000000000001'), 'n': 3}
        assert type(data['n']) is int
    
    @pytest.mark.asyncio
    async def test_call_raises_api_error(self, config, transport, respond):
        """Test failure statuses surface as ApiError."""
        transport.responses.append(
            respond({'message': 'Not found', 'code': 404, 'type': 'not_found'}, status=404)
        )
        api = AsyncAPIClient(config, transport)
        
        with pytest.raises(ApiError) as exc_info:
            await api.call('GET', '/missing')
        
        assert exc_info.value.type == 'not_found'
    
    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, config, transport):
        """Test transport failures are not turned into API errors."""
        async def failing(request):
            raise TransportError("connection refused")
        
        transport.execute = failing
        api = AsyncAPIClient(config, transport)
        
        with pytest.raises(TransportError):
            await api.call('GET', '/health')
    
    @pytest.mark.asyncio
    async def test_secrets_not_logged(self, config, transport, respond, caplog):
        """Test API keys and JWTs are masked in debug logs."""
        transport.responses.append(respond({}))
        api = AsyncAPIClient(config, transport)
        api.add_header('x-appwrite-key', 'super-secret')
        
        with caplog.at_level(logging.DEBUG, logger='appclient.api'):
            await api.call('GET', '/health')
        
        assert 'super-secret' not in caplog.text
    
    @pytest.mark.asyncio
    async def test_close_closes_transport(self, config, transport):
        """Test closing the client closes the transport."""
        async with AsyncAPIClient(config, transport):
            pass
        
        assert transport.closed
    
    @pytest.mark.asyncio
    async def test_concurrent_calls(self, config, transport, respond):
        """Test independent calls can be awaited together."""
        transport.handler = lambda request, index: respond({'path': request.url})
        api = AsyncAPIClient(config, transport)
        
        results = await asyncio.gather(
            api.call('GET', '/a'),
            api.call('GET', '/b'),
        )
        
        assert {r['path'] for r in results} == {
            'https://api.example.com/v1/a',
            'https://api.example.com/v1/b',
        }
