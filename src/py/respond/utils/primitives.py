from typing import Any
from base64 import b64encode
from time import struct_time, strftime
from decimal import Decimal
from datetime import date, datetime, time
from dataclasses import is_dataclass, fields
from pathlib import Path
from enum import Enum


TLiteral = bool | int | float | str | bytes
TComposite = (
	list[TLiteral] | dict[TLiteral, TLiteral] | set[TLiteral] | tuple[TLiteral, ...]
)
TComposite2 = (
	list[TLiteral | TComposite]
	| dict[TLiteral, TLiteral | TComposite]
	| set[TLiteral | TComposite]
	| tuple[TLiteral | TComposite, ...]
)
TPrimitive = bool | int | float | str | bytes | TComposite | TComposite2

# Nesting beyond that is treated as a circular structure
MAX_DEPTH: int = 128


def asPrimitive(value: Any, *, currentDepth: int = 0) -> Any:
	"""Converts the given value to a primitive value, that can be converted
	to JSON. Values that have no primitive equivalent are returned as-is,
	and will be rejected by the JSON encoder."""
	if currentDepth > MAX_DEPTH:
		raise ValueError(
			f"Value is nested more than {MAX_DEPTH} levels, it may be circular"
		)
	depth = currentDepth + 1
	if value is None or type(value) in (bool, float, int, str):
		return value
	elif isinstance(value, tuple) and hasattr(value, "_fields"):
		f = getattr(type(value), "asPrimitive", None)
		return (
			f(value)
			if f
			else {
				k: asPrimitive(getattr(value, k), currentDepth=depth)
				for k in value._fields
			}
		)
	elif isinstance(value, list) or isinstance(value, tuple) or isinstance(value, set):
		return [asPrimitive(v, currentDepth=depth) for v in value]
	elif is_dataclass(value) and not isinstance(value, type):
		return {
			_.name: asPrimitive(getattr(value, _.name), currentDepth=depth)
			for _ in fields(value)
		}
	elif isinstance(value, Enum):
		return asPrimitive(value.value, currentDepth=depth)
	elif isinstance(value, dict):
		return {
			asPrimitive(k, currentDepth=depth): asPrimitive(v, currentDepth=depth)
			for k, v in value.items()
		}
	elif isinstance(value, bytes) or isinstance(value, bytearray):
		return b64encode(value).decode("ascii")
	elif isinstance(value, Decimal):
		return str(value)
	elif isinstance(value, Path):
		return str(value)
	elif isinstance(value, datetime) or isinstance(value, date) or isinstance(value, time):
		return value.isoformat()
	elif isinstance(value, struct_time):
		return strftime("%Y-%m-%dT%H:%M:%S", value)
	else:
		return value


# EOF
