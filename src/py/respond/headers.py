from typing import Iterable, Iterator, Mapping, TypeAlias

# -----------------------------------------------------------------------------
#
# HELPERS
#
# -----------------------------------------------------------------------------


def headername(name: str, *, headers: dict[str, str] = {}) -> str:
	"""Normalizes the header name as `Kebab-Case`."""
	if name in headers:
		return headers[name]
	key: str = name.lower()
	if key in headers:
		return headers[key]
	else:
		normalized: str = "-".join(_.capitalize() for _ in name.split("-"))
		headers[key] = normalized
		return normalized


# -----------------------------------------------------------------------------
#
# HEADERS
#
# -----------------------------------------------------------------------------


class Headers:
	"""An ordered multimap of HTTP headers. Names are case insensitive and
	normalized with `headername`, values for a given name keep their
	insertion order."""

	__slots__ = ["_values"]

	@staticmethod
	def From(headers: "THeaders | None") -> "Headers":
		"""Creates a new `Headers` instance from the given value, which is
		always copied."""
		res = Headers()
		if headers is None:
			pass
		elif isinstance(headers, Headers):
			for name, values in headers._values.items():
				res._values[name] = list(values)
		elif isinstance(headers, Mapping):
			for name, value in headers.items():
				# A name without values is kept, so that it still overrides
				res._values.setdefault(headername(name), [])
				if isinstance(value, str) or isinstance(value, int):
					res.add(name, value)
				else:
					for v in value:
						res.add(name, v)
		else:
			for name, v in headers:
				res.add(name, v)
		return res

	def __init__(self) -> None:
		self._values: dict[str, list[str]] = {}

	def add(self, name: str, value: str | int) -> "Headers":
		"""Appends the value to the ones already defined for `name`."""
		key = headername(name)
		if key not in self._values:
			self._values[key] = []
		self._values[key].append(str(value))
		return self

	def set(self, name: str, value: str | int) -> "Headers":
		"""Replaces all values of `name` with the given one."""
		self._values[headername(name)] = [str(value)]
		return self

	def remove(self, name: str) -> "Headers":
		self._values.pop(headername(name), None)
		return self

	def get(self, name: str) -> str | None:
		"""Returns the first value of `name`, if any."""
		values = self._values.get(headername(name))
		return values[0] if values else None

	def getAll(self, name: str) -> list[str]:
		return list(self._values.get(headername(name), ()))

	def has(self, name: str) -> bool:
		return headername(name) in self._values

	def keys(self) -> list[str]:
		return list(self._values.keys())

	def items(self) -> Iterator[tuple[str, str]]:
		"""Iterates on `(name, value)` pairs, one per value."""
		for name, values in self._values.items():
			for value in values:
				yield name, value

	def groups(self) -> Iterator[tuple[str, list[str]]]:
		"""Iterates on `(name, values)` pairs, one per name."""
		for name, values in self._values.items():
			yield name, list(values)

	def copy(self) -> "Headers":
		return Headers.From(self)

	def __contains__(self, name: object) -> bool:
		return isinstance(name, str) and self.has(name)

	def __len__(self) -> int:
		return len(self._values)

	def __bool__(self) -> bool:
		return bool(self._values)

	def __eq__(self, other: object) -> bool:
		return isinstance(other, Headers) and self._values == other._values

	def __repr__(self) -> str:
		return f"Headers({self._values})"


# What is accepted wherever headers are given: a multimap, a mapping of
# names to one or more values, or a sequence of `(name, value)` pairs.
THeaders: TypeAlias = (
	Headers | Mapping[str, str | int | list[str] | tuple[str, ...]] | Iterable[tuple[str, str]]
)


# EOF
