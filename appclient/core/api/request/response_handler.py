"""Response interpretation: decoded value of the target type, or an error."""
from typing import Any, Optional

from ...exceptions import ApiError, DecodeError
from ..json_codec import JsonCodec
from ..types import Converter
from .models import RawResponse


class ResponseHandler:
    """Turns raw responses into results or ``ApiError``."""
    
    def __init__(self, codec: Optional[JsonCodec] = None):
        self.codec = codec or JsonCodec()
    
    def interpret(
        self,
        response: RawResponse,
        response_type: type = dict,
        convert: Optional[Converter] = None
    ) -> Any:
        """
        Interpret a response.
        
        Args:
            response: Raw response from the transport
            response_type: ``bool``, ``bytes`` or ``dict``
            convert: Optional mapping converter applied on success
            
        Returns:
            ``True`` for bool targets and empty bodies, the body for bytes
            targets, otherwise the (converted) decoded mapping
            
        Raises:
            ApiError: If the status indicates failure
            DecodeError: If a JSON body was required but not valid
        """
        if not response.ok:
            raise self.build_error(response)
        
        if response_type is bool:
            return True
        if response_type is bytes:
            return response.body
        if not response.body:
            return True
        
        data = self.codec.decode(response.text())
        if convert is not None:
            return convert(data)
        return data
    
    def build_error(self, response: RawResponse) -> ApiError:
        body = response.text()
        if 'application/json' in response.content_type:
            try:
                data = self.codec.decode(body)
                code = data.get('code')
                code = int(code) if code is not None else response.status
            except (DecodeError, ValueError, TypeError):
                # Unreadable error payload; report the raw body
                pass
            else:
                return ApiError(
                    message=data.get('message') or '',
                    code=code,
                    type=data.get('type') or '',
                    response=body,
                    status=response.status
                )
        return ApiError(
            message=body,
            code=response.status,
            response=body,
            status=response.status
        )
