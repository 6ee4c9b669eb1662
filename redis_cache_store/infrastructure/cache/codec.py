"""JSON serialization codec for stored values.

Values are stored as JSON text. The absence marker has no JSON form, so it is
stored as the bare token ``undefined``: that text is not valid JSON and can
never collide with an encoded value (the string "undefined" encodes to
``"undefined"`` with quotes).

Wire format:
    Absent.ABSENT   -> undefined
    None            -> null
    "bar"           -> "bar"
    {"a": 1}        -> {"a": 1}

Decoding tolerates what redis clients hand back: ``None`` for a missing key,
``bytes`` when responses are not decoded, ``str`` when they are, and native
values some clients already parsed.

Only values that read back equal to what was written are encoded. Tuples
(read back as lists) and mappings with non-string keys (keys read back as
strings) are refused, as are non-JSON values such as sets, datetimes and
arbitrary objects.
"""

import json
from typing import Any

from redis_cache_store.domain.value_objects.absence import Absent

ABSENT_WIRE_VALUE = "undefined"


class JsonCodec:
    """Converts application values to and from their stored text form."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def encode(self, value: Any) -> str:
        """Encode a value for storage.

        Args:
            value: Application value (already accepted by the policy).

        Returns:
            Stored text form.

        Raises:
            TypeError: If the value is not JSON serializable, or would not read
                back unchanged (tuples, non-string mapping keys).
            ValueError: If the value contains circular references or NaN-like
                values JSON cannot carry.
        """
        if value is Absent.ABSENT:
            return ABSENT_WIRE_VALUE
        _check_round_trip(value, path="value", seen=set())
        return json.dumps(value, allow_nan=False)

    def decode(self, raw: Any) -> Any:
        """Decode a stored value.

        Args:
            raw: What the client returned for one key.

        Returns:
            Decoded value, or Absent.ABSENT when the key is missing or holds
            the stored absence marker.

        Raises:
            ValueError: If the stored text is not valid JSON (also raised as
                UnicodeDecodeError for undecodable bytes).
        """
        if raw is None:
            return Absent.ABSENT
        if isinstance(raw, (bytes, bytearray, memoryview)):
            raw = bytes(raw).decode(self.encoding)
        if not isinstance(raw, str):
            # Client already parsed it
            return raw
        if raw == ABSENT_WIRE_VALUE:
            return Absent.ABSENT
        return json.loads(raw)

    def decode_key(self, raw: Any) -> str:
        """Decode a key name returned by the store."""
        if isinstance(raw, (bytes, bytearray, memoryview)):
            return bytes(raw).decode(self.encoding)
        return str(raw)


def _check_round_trip(value: Any, *, path: str, seen: set[int]) -> None:
    """Reject containers JSON would change on the way back."""
    if isinstance(value, tuple):
        raise TypeError(f"{path} is a tuple and would read back as a list")
    if not isinstance(value, (dict, list)):
        return
    if id(value) in seen:
        raise ValueError("Circular reference detected")
    seen.add(id(value))
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"{path} has non-string key {key!r} that would read back as a string"
                )
            _check_round_trip(item, path=f"{path}[{key!r}]", seen=seen)
    else:
        for index, item in enumerate(value):
            _check_round_trip(item, path=f"{path}[{index}]", seen=seen)
    seen.discard(id(value))
