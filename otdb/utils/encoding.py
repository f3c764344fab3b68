import base64
from typing import Iterable, List


def decode_base64_text(value: str) -> str:
    """
    Decode a standard alphabet base64 string into UTF-8 text.

    Raises ValueError (binascii.Error and UnicodeDecodeError included) on malformed
    input, the raw value is never passed through.
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a base64 string, got {type(value).__name__}")
    return base64.b64decode(value, validate=True).decode("utf-8")


def decode_base64_list(values: Iterable[str]) -> List[str]:
    return [decode_base64_text(v) for v in values]
