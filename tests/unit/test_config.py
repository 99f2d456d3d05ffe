"""Tests for client configuration."""
import ssl

import aiohttp
import pytest

from appclient.core.api import ClientConfig, SSLConfig, TimeoutConfig, DEFAULT_CHUNK_SIZE


class TestClientConfig:
    """Test suite for ClientConfig."""
    
    def test_defaults(self):
        """Test default endpoint and chunk size."""
        config = ClientConfig.default()
        
        assert config.endpoint == 'https://appwrite.io/v1'
        assert config.chunk_size == DEFAULT_CHUNK_SIZE == 5 * 1024 * 1024
        assert not config.self_signed
    
    def test_endpoint_trailing_slash_stripped(self):
        """Test endpoint normalization."""
        assert ClientConfig(endpoint='https://x.io/v1/').endpoint == 'https://x.io/v1'
    
    def test_invalid_chunk_size(self):
        """Test chunk size must be positive."""
        with pytest.raises(ValueError):
            ClientConfig(chunk_size=0)
    
    def test_copy_is_independent(self):
        """Test copies share no nested mutable state."""
        config = ClientConfig(extra_headers={'x-a': '1'})
        
        copied = config.copy()
        copied.ssl.verify = False
        copied.timeout.total = 5
        copied.extra_headers['x-b'] = '2'
        
        assert copied == ClientConfig(
            ssl=SSLConfig(verify=False),
            timeout=TimeoutConfig(total=5),
            extra_headers={'x-a': '1', 'x-b': '2'},
        )
        assert config.ssl.verify
        assert config.timeout.total == 300.0
        assert config.extra_headers == {'x-a': '1'}
    
    def test_decimal_numbers_off_by_default(self):
        """Test floats decode as float unless asked otherwise."""
        assert ClientConfig().decimal_numbers is False
    
    def test_insecure(self):
        """Test insecure config disables verification."""
        config = ClientConfig.insecure()
        
        assert config.self_signed
        assert config.get_connector_kwargs()['ssl'] is False
    
    def test_strict_ssl_context(self):
        """Test strict mode builds a verifying context."""
        context = SSLConfig().create_ssl_context()
        
        assert isinstance(context, ssl.SSLContext)
        assert context.verify_mode == ssl.CERT_REQUIRED
    
    def test_timeout_conversion(self):
        """Test timeouts map onto aiohttp.ClientTimeout."""
        timeout = TimeoutConfig(total=10, connect=2).to_aiohttp_timeout()
        
        assert isinstance(timeout, aiohttp.ClientTimeout)
        assert timeout.total == 10
        assert timeout.connect == 2
