from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, TypeAlias

from mypy_extensions import Arg

from .encoders import Encoder
from .headers import Headers
from .utils.logging import warning

if TYPE_CHECKING:
	from .dispatch import With

# -----------------------------------------------------------------------------
#
# ERRORS
#
# -----------------------------------------------------------------------------


class OptionsError(RuntimeError):
	"""Raised when options are missing a required encoder or function, which
	denotes a broken setup rather than a runtime condition."""

	def __init__(self, message: str, missing: list[str] | None = None):
		super().__init__(message)
		self.message: str = message
		self.missing: list[str] = missing or []


# -----------------------------------------------------------------------------
#
# COLLABORATORS
#
# -----------------------------------------------------------------------------
# The request and the response writer are provided by the surrounding
# server: these define the small subset that responding relies on.


class RequestInfo(ABC):
	"""The inbound request, as seen when responding. Only headers are
	read, and any object with a compatible `header` method can be used."""

	@abstractmethod
	def header(self, name: str) -> str | None: ...


class ResponseWriter(ABC):
	"""The output sink of a response: a mutable multimap of headers, a
	one-shot commit of the status and headers, and a body writer."""

	__slots__ = ["headers", "status"]

	def __init__(self) -> None:
		self.headers: Headers = Headers()
		self.status: int | None = None

	@property
	def committed(self) -> bool:
		return self.status is not None

	def writeHeader(self, status: int) -> bool:
		"""Commits the status and headers, which can only happen once. Returns
		`False` when the response was already committed."""
		if self.status is not None:
			warning(
				"Superfluous writeHeader call, response is already committed",
				Status=status,
				Committed=self.status,
			)
			return False
		self.status = status
		self._commit(status)
		return True

	def write(self, chunk: bytes) -> int:
		"""Writes a chunk of the body, committing a `200` status first if
		nothing was committed yet."""
		if self.status is None:
			self.writeHeader(200)
		return self._write(chunk)

	@abstractmethod
	def _commit(self, status: int) -> None: ...

	@abstractmethod
	def _write(self, chunk: bytes) -> int: ...


# -----------------------------------------------------------------------------
#
# CONTEXT
#
# -----------------------------------------------------------------------------


class Ctx:
	"""Wraps the response writer, the request, the response description and
	the options resolved for it. This is what all the functions of `Options`
	receive, so that they can be overridden consistently."""

	__slots__ = ["w", "r", "with_", "options", "selected"]

	def __init__(
		self,
		w: ResponseWriter,
		r: RequestInfo | None,
		with_: "With",
		options: "Options",
	):
		self.w: ResponseWriter = w
		self.r: RequestInfo | None = r
		self.with_: With = with_
		self.options: Options = options
		# The encoder, once selected for this response
		self.selected: Encoder | None = None

	def __repr__(self) -> str:
		return f"Ctx({self.with_} {self.options})"


# Signatures of the functions that can be swapped in `Options`
TSetHeaders: TypeAlias = Callable[[Arg(Ctx, "c")], None]
TWriteHeader: TypeAlias = Callable[[Arg(Ctx, "c"), Arg(int, "status")], None]
TWriteData: TypeAlias = Callable[[Arg(Ctx, "c"), Arg(Any, "data")], None]
TSelectEncoder: TypeAlias = Callable[[Arg(Ctx, "c")], Encoder | None]


# -----------------------------------------------------------------------------
#
# OPTIONS
#
# -----------------------------------------------------------------------------


class Options:
	"""The options with which responses are written. Default options are
	available as `respond.DefaultOptions`, and can either be changed directly
	(before serving requests) or copied and given to specific responses."""

	__slots__ = [
		"encoders",
		"defaultEncoder",
		"defaultStatus",
		"defaultHeaders",
		"setHeaders",
		"writeHeader",
		"writeData",
		"encoder",
	]

	REQUIRED: tuple[str, ...] = (
		"defaultEncoder",
		"setHeaders",
		"writeHeader",
		"writeData",
		"encoder",
	)

	def __init__(
		self,
		*,
		encoders: dict[str, Encoder] | None = None,
		defaultEncoder: Encoder | None = None,
		defaultStatus: int = 200,
		defaultHeaders: Headers | None = None,
		setHeaders: TSetHeaders | None = None,
		writeHeader: TWriteHeader | None = None,
		writeData: TWriteData | None = None,
		encoder: TSelectEncoder | None = None,
	):
		# Content types mapped to the encoder that produces them
		self.encoders: dict[str, Encoder] = {} if encoders is None else encoders
		self.defaultEncoder: Encoder | None = defaultEncoder
		self.defaultStatus: int = defaultStatus
		# Merged with the explicit headers of each response, see `setHeaders`
		self.defaultHeaders: Headers = (
			Headers() if defaultHeaders is None else defaultHeaders
		)
		self.setHeaders: TSetHeaders | None = setHeaders
		self.writeHeader: TWriteHeader | None = writeHeader
		self.writeData: TWriteData | None = writeData
		self.encoder: TSelectEncoder | None = encoder

	def copy(self) -> "Options":
		"""Returns a copy of these options that can be modified without
		affecting them. Encoders and functions are shared."""
		return Options(
			encoders=dict(self.encoders),
			defaultEncoder=self.defaultEncoder,
			defaultStatus=self.defaultStatus,
			defaultHeaders=self.defaultHeaders.copy(),
			setHeaders=self.setHeaders,
			writeHeader=self.writeHeader,
			writeData=self.writeData,
			encoder=self.encoder,
		)

	def validate(self) -> "Options":
		"""Ensures the options can be used to respond, raising an
		`OptionsError` otherwise."""
		missing: list[str] = [_ for _ in self.REQUIRED if getattr(self, _) is None]
		if missing:
			raise OptionsError(
				f"Options are missing required values: {', '.join(missing)}",
				missing=missing,
			)
		return self

	def __repr__(self) -> str:
		return f"Options(status={self.defaultStatus} encoders={list(self.encoders)} headers={self.defaultHeaders})"


# EOF
