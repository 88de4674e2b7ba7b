from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol

from .utils.json import json

# -----------------------------------------------------------------------------
#
# ERRORS
#
# -----------------------------------------------------------------------------


class EncodingError(ValueError):
	"""Raised when an encoder can't serialize the data it was given. The
	original error, if any, is available as `__cause__`."""

	def __init__(
		self, message: str, data: Any = None, contentType: str | None = None
	):
		super().__init__(message)
		self.message: str = message
		self.data: Any = data
		self.contentType: str | None = contentType


# -----------------------------------------------------------------------------
#
# ENCODERS
#
# -----------------------------------------------------------------------------


class Writable(Protocol):
	def write(self, chunk: bytes) -> int: ...


class Encoder(ABC):
	"""An object capable of encoding data to a writer."""

	# The content type of the encoded output
	contentType: ClassVar[str] = "application/octet-stream"

	@abstractmethod
	def encode(self, w: Writable, data: Any) -> None:
		"""Writes the encoded data to the writer, raising an `EncodingError`
		if it can't be encoded."""

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}({self.contentType})"


class JSONEncoder(Encoder):
	"""Writes the data as a single JSON document followed by a newline."""

	contentType: ClassVar[str] = "application/json"

	def encode(self, w: Writable, data: Any) -> None:
		try:
			payload = json(data)
		except (TypeError, ValueError) as e:
			raise EncodingError(
				f"Can't encode value as JSON: {e}",
				data=data,
				contentType=self.contentType,
			) from e
		w.write(payload + b"\n")


# The shared default encoder instance
JSON: JSONEncoder = JSONEncoder()


# EOF
