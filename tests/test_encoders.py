from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import NamedTuple

import pytest

from respond.encoders import JSON, EncodingError, JSONEncoder
from respond.utils.json import unjson


class Buffer:
	def __init__(self) -> None:
		self.data = bytearray()

	def write(self, chunk: bytes) -> int:
		self.data += chunk
		return len(chunk)


def encode(value) -> bytes:
	w = Buffer()
	JSON.encode(w, value)
	return bytes(w.data)


class Color(Enum):
	Red = "red"


class Point(NamedTuple):
	x: int
	y: int


@dataclass
class Item:
	name: str
	price: Decimal


def test_json_is_compact_with_trailing_newline():
	assert encode({"one": 1}) == b'{"one":1}\n'
	assert encode([1, "two", None, True]) == b'[1,"two",null,true]\n'
	assert JSONEncoder.contentType == "application/json"


def test_json_converts_values_to_primitives():
	assert unjson(encode(Point(1, 2))) == {"x": 1, "y": 2}
	assert unjson(encode(Item("pen", Decimal("1.50")))) == {
		"name": "pen",
		"price": "1.50",
	}
	assert unjson(encode({"color": Color.Red, "on": date(2024, 1, 2)})) == {
		"color": "red",
		"on": "2024-01-02",
	}
	assert unjson(encode(b"Stretchr")) == "U3RyZXRjaHI="


def test_unsupported_value_raises_encoding_error():
	value = object()
	with pytest.raises(EncodingError) as info:
		encode({"value": value})
	assert info.value.contentType == "application/json"
	assert isinstance(info.value.__cause__, TypeError)


def test_circular_value_raises_encoding_error():
	value: dict = {}
	value["self"] = value
	with pytest.raises(EncodingError):
		encode(value)


def test_nan_raises_encoding_error():
	with pytest.raises(EncodingError):
		encode(float("nan"))


# EOF
