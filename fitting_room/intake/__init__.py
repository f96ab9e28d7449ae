"""Upload validation and transport encoding."""

from .encoder import decode_payload, encode, strip_data_uri_prefix, to_data_uri
from .validators import ALLOWED_FORMATS, validate_upload

__all__ = [
    "ALLOWED_FORMATS",
    "decode_payload",
    "encode",
    "strip_data_uri_prefix",
    "to_data_uri",
    "validate_upload",
]
