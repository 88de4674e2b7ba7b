from typing import Any, TypeAlias, cast
import json as basejson
from .primitives import asPrimitive
from ..config import DEFAULT_ENCODING

TJSON: TypeAlias = None | int | float | bool | str | list[Any] | dict[str, Any]


def json(value: Any) -> bytes:
	"""Converts the value to compact JSON, raising `TypeError` or `ValueError`
	when it can't be represented."""
	return basejson.dumps(
		asPrimitive(value), separators=(",", ":"), allow_nan=False
	).encode(DEFAULT_ENCODING)


def unjson(value: bytes | str) -> TJSON:
	"""Parses the JSON-encoded value."""
	return cast(TJSON, basejson.loads(value))


# EOF
