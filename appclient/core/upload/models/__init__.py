"""Upload data models."""
from .upload_models import InputFile, UploadProgress, UploadSession, normalize_input_file

__all__ = [
    'InputFile',
    'UploadProgress',
    'UploadSession',
    'normalize_input_file',
]
