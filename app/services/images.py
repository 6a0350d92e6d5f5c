import base64
import binascii
import re
from dataclasses import dataclass
from typing import Optional, Tuple
from app.core.errors import ValidationError

_DATA_URI_RE = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?:;[\w.+-]+=[^;,]*)*;base64,(?P<payload>.*)$",
    re.DOTALL,
)

@dataclass
class StoredImage:
    """Image columns of a product row; at most one of ``data`` and ``url`` is set."""
    data: Optional[bytes] = None
    mime: Optional[str] = None
    url: Optional[str] = None

def to_data_uri(data: bytes, mime: str) -> str:
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"

def decode_data_uri(uri: str) -> Tuple[bytes, str]:
    """
    Split a base64 data URI into its payload bytes and MIME type.

    Raises:
        ValidationError: if the URI is not base64 encoded or the payload is corrupt
    """
    match = _DATA_URI_RE.match(uri.strip())
    if not match:
        raise ValidationError("Image must be a base64 data URI")

    payload = re.sub(r"\s+", "", match.group("payload"))
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("Image payload is not valid base64")
    return data, match.group("mime").lower()

def parse_image_input(value: Optional[str], max_bytes: int) -> StoredImage:
    """
    Turn the ``image`` field of an admin request into storable columns.

    Accepts a data URI (decoded to bytes), an http(s) URL (kept as a link)
    or an empty value (no image).
    """
    if value is None or not value.strip():
        return StoredImage()

    value = value.strip()
    if value.startswith(("http://", "https://")):
        return StoredImage(url=value)

    data, mime = decode_data_uri(value)
    if not mime.startswith("image/"):
        raise ValidationError("File must be an image")
    if not data:
        raise ValidationError("Image payload is empty")
    if len(data) > max_bytes:
        raise ValidationError(f"Image exceeds the {max_bytes} byte limit")
    return StoredImage(data=data, mime=mime)
