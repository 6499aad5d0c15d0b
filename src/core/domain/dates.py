"""Codec for the `{"isoString": "..."}` timestamp wrapper.

The pathfinder schema wraps some timestamps (album `addedAt`, album `date`)
in an extra object layer, while other ISO-8601 fields in the same payload are
plain strings. The codec is therefore bound per field through
`IsoStringDateTime` instead of overriding datetime parsing globally.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AwareDatetime, BeforeValidator, PlainSerializer, TypeAdapter, ValidationError

from core.errors import DeserializationError

ISO_STRING_KEY = "isoString"

# Date and time of day are mandatory; the rest is checked by `AwareDatetime`.
_ISO_8601_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}")


def _unwrap_iso_string(value: Any) -> Any:
    # Python-side construction hands us a datetime already.
    if isinstance(value, datetime):
        return value
    if not isinstance(value, Mapping):
        raise ValueError(f"expected an object with '{ISO_STRING_KEY}', got {type(value).__name__}")
    if ISO_STRING_KEY not in value:
        raise ValueError(f"missing '{ISO_STRING_KEY}' key")
    iso = value[ISO_STRING_KEY]
    # pydantic would accept ints and digit strings as unix timestamps; the wire format never does.
    if not isinstance(iso, str):
        raise ValueError(f"'{ISO_STRING_KEY}' must be a string, got {type(iso).__name__}")
    if not _ISO_8601_PREFIX_RE.match(iso):
        raise ValueError(f"'{ISO_STRING_KEY}' is not an ISO-8601 date-time: {iso!r}")
    return iso


def encode_iso_string(value: datetime) -> dict[str, str]:
    """Encode an aware datetime as `{"isoString": "YYYY-MM-DDTHH:MM:SSZ"}` (UTC)."""

    utc = value.astimezone(timezone.utc)
    return {ISO_STRING_KEY: utc.isoformat().replace("+00:00", "Z")}


IsoStringDateTime = Annotated[
    AwareDatetime,
    BeforeValidator(_unwrap_iso_string),
    PlainSerializer(encode_iso_string, when_used="json"),
]

_ADAPTER: TypeAdapter[datetime] = TypeAdapter(IsoStringDateTime)


def decode_iso_string(value: Any) -> datetime:
    """Decode `{"isoString": "2020-11-07T03:27:58Z"}` into an aware datetime.

    Raises:
        DeserializationError: for any other shape, a non-string value or a
            timestamp without offset.
    """

    try:
        return _ADAPTER.validate_python(value)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise DeserializationError(
            f"invalid isoString timestamp: {first['msg']}",
            context={"value": value},
        ) from exc
