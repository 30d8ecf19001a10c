"""Parsing and building of ``data:<mime>;base64,<payload>`` strings."""
import base64
import binascii
import re
from typing import Union

from app.core.exceptions import ValidationError
from app.models.image import DecodedImage

DATA_URI_PATTERN = re.compile(r'^data:([^;]+);base64,(.+)$')


def is_data_uri(value: str) -> bool:
    """Whether the string claims to be a data URI."""
    return value.startswith("data:")


def parse_data_uri(value: str) -> DecodedImage:
    """Decode a base64 data URI into its MIME type and bytes.

    Raises:
        ValidationError: If the string is not a well-formed base64 data URI
    """
    match = DATA_URI_PATTERN.match(value or "")
    if not match:
        raise ValidationError("Invalid base64 image format")

    mime_type, payload = match.group(1), match.group(2)
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("Invalid base64 image format", {"mime_type": mime_type})

    return DecodedImage(mime_type=mime_type, data=data)


def build_data_uri(mime_type: str, data: Union[bytes, str]) -> str:
    """Encode bytes (or an already base64 string) as a data URI."""
    if isinstance(data, bytes):
        data = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{data}"
