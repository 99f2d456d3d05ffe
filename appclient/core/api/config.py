"""
Client configuration module.

Groups everything a client instance needs to talk to the service:
endpoint, TLS mode, timeouts, chunk size and connection pool limits.
"""
from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any, Union
import ssl

import aiohttp


DEFAULT_ENDPOINT = 'https://appwrite.io/v1'
DEFAULT_CHUNK_SIZE = 5 * 1024 * 1024  # 5MB


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.
    
    ``verify=False`` is the permissive mode: certificate chains and
    hostnames are not checked (self-signed servers).
    """
    verify: bool = True
    ca_file: Optional[str] = None
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    
    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create the value passed as ``ssl`` to aiohttp."""
        if not self.verify:
            return False
        
        context = ssl.create_default_context()
        
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        
        if self.cert_file:
            context.load_cert_chain(self.cert_file, keyfile=self.key_file)
        
        return context


@dataclass
class TimeoutConfig:
    """Timeouts handed to the transport; the client adds none of its own."""
    total: Optional[float] = 300.0
    connect: Optional[float] = 30.0
    sock_read: Optional[float] = 60.0
    sock_connect: Optional[float] = 30.0
    
    def to_aiohttp_timeout(self) -> aiohttp.ClientTimeout:
        """Convert to aiohttp ClientTimeout."""
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass
class ClientConfig:
    """
    Complete client configuration.
    
    Example:
        >>> config = ClientConfig(endpoint='https://cloud.example.com/v1')
        >>> config.chunk_size
        5242880
    """
    endpoint: str = DEFAULT_ENDPOINT
    
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    
    # Upload chunk bound in bytes
    chunk_size: int = DEFAULT_CHUNK_SIZE
    
    # Headers added to the persistent set at construction
    extra_headers: Dict[str, str] = field(default_factory=dict)
    
    log_level: int = 20  # logging.INFO
    
    # Decode non-integer JSON numbers as Decimal
    decimal_numbers: bool = False
    
    limit: int = 100
    limit_per_host: int = 10
    
    def __post_init__(self):
        self.endpoint = self.endpoint.rstrip('/')
        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
    
    @classmethod
    def default(cls) -> 'ClientConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def insecure(cls, **kwargs) -> 'ClientConfig':
        """Create configuration that accepts self-signed certificates."""
        return cls(ssl=SSLConfig(verify=False), **kwargs)
    
    def copy(self) -> 'ClientConfig':
        """Return a copy that shares no mutable state with this one."""
        return replace(
            self,
            ssl=replace(self.ssl),
            timeout=replace(self.timeout),
            extra_headers=dict(self.extra_headers),
        )
    
    @property
    def self_signed(self) -> bool:
        """True when TLS verification is permissive."""
        return not self.ssl.verify
    
    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }
    
    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        return {
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
