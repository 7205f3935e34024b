from __future__ import annotations

import base64
import binascii
import re

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+)?(;[\w=-]+)*;base64,", re.IGNORECASE)


def is_data_uri(payload: str) -> bool:
    return bool(_DATA_URI_RE.match(payload or ""))


def strip_data_uri(payload: str) -> str:
    """Return the bare base64 content of a data URI, or the input unchanged."""
    return _DATA_URI_RE.sub("", payload or "", count=1).strip()


def to_data_uri(payload: str, mime: str = "image/jpeg") -> str:
    if is_data_uri(payload):
        return payload
    return f"data:{mime};base64,{payload.strip()}"


def decoded_size(payload: str) -> int:
    """Byte length of the decoded image, or 0 when the payload is not valid base64."""
    try:
        return len(base64.b64decode(strip_data_uri(payload), validate=True))
    except (binascii.Error, ValueError):
        return 0
