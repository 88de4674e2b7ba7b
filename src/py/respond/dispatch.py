from typing import Any, NamedTuple, cast

from . import config
from .encoders import JSON, EncodingError
from .headers import THeaders
from .model import (
	Ctx,
	Options,
	RequestInfo,
	ResponseWriter,
	TWriteData,
	TWriteHeader,
)
from .policy import HEADER_POLICIES, selectEncoder, writeData, writeHeader
from .utils.logging import LogLevel, debug, logged, warning

# -----------------------------------------------------------------------------
#
# OPTIONS
#
# -----------------------------------------------------------------------------


def createOptions(
	*,
	defaultStatus: int | None = None,
	policy: str | None = None,
) -> Options:
	"""Creates options with the default behaviour: JSON encoding, and the
	status and header merge policy from `respond.config` unless given."""
	policy = (policy or config.HEADERS).lower()
	if policy not in HEADER_POLICIES:
		warning(
			"Unknown header policy, using override instead",
			Policy=policy,
			Expected=list(HEADER_POLICIES),
		)
		policy = "override"
	return Options(
		encoders={JSON.contentType: JSON},
		defaultEncoder=JSON,
		defaultStatus=config.DEFAULT_STATUS if defaultStatus is None else defaultStatus,
		setHeaders=HEADER_POLICIES[policy],
		writeHeader=writeHeader,
		writeData=writeData,
		encoder=selectEncoder,
	)


# The options used by responses that don't define their own. They can be
# changed directly, but only before requests are served as there is no
# synchronization.
DefaultOptions: Options = createOptions()


# -----------------------------------------------------------------------------
#
# RESPONSE
#
# -----------------------------------------------------------------------------


class With(NamedTuple):
	"""Describes the response to be written, as in
	`With(data=obj, status=201).to(w, r)`."""

	# The data to respond with, no body is written when `None`
	data: Any = None
	# The HTTP status, `DefaultStatus` of the options when `None` (or 0)
	status: int | None = None
	# Explicit headers, merged with the options' default headers
	headers: THeaders | None = None
	# The options to respond with, `DefaultOptions` when `None`
	options: Options | None = None

	def to(self, w: ResponseWriter, r: RequestInfo | None = None) -> None:
		"""Writes the response to `w`, using `r` for content negotiation."""
		Responder().dispatch(self, w, r)


def resolveOptions(with_: With, default: Options) -> Options:
	"""Returns the options of the response if it has any, or the default
	ones. Options are never merged."""
	return default if with_.options is None else with_.options


def resolveStatus(with_: With, options: Options) -> int:
	"""Returns the explicit status of the response or the default one."""
	return with_.status if with_.status else options.defaultStatus


# -----------------------------------------------------------------------------
#
# RESPONDER
#
# -----------------------------------------------------------------------------


class Responder:
	"""Dispatches responses to writers using the options it owns, or
	`DefaultOptions` when it has none. Options are expected to be set up
	before responses are dispatched."""

	__slots__ = ["options"]

	def __init__(self, options: Options | None = None) -> None:
		self.options: Options | None = options

	@property
	def defaults(self) -> Options:
		return DefaultOptions if self.options is None else self.options

	def dispatch(
		self, with_: With, w: ResponseWriter, r: RequestInfo | None = None
	) -> None:
		"""Writes the status, headers and encoded data of the response to `w`,
		raising an `EncodingError` when the data can't be encoded. The body
		may then be partially written."""
		options = resolveOptions(with_, self.defaults).validate()
		status = resolveStatus(with_, options)
		c = Ctx(w, r, with_, options)
		# NOTE: `validate` guarantees the functions are set
		write_header = cast(TWriteHeader, options.writeHeader)
		write_data = cast(TWriteData, options.writeData)
		write_header(c, status)
		if with_.data is not None:
			try:
				write_data(c, with_.data)
			except EncodingError as e:
				warning(
					"Response data could not be encoded",
					Status=status,
					ContentType=e.contentType,
					Reason=e.message,
				)
				raise
		if logged(LogLevel.Debug):
			debug(
				"Response dispatched",
				Status=status,
				Encoder=repr(c.selected) if c.selected else None,
				Headers=len(w.headers),
			)

	def respond(
		self,
		w: ResponseWriter,
		r: RequestInfo | None = None,
		data: Any = None,
		*,
		status: int | None = None,
		headers: THeaders | None = None,
		options: Options | None = None,
	) -> With:
		"""Shorthand to dispatch a response, returning its description."""
		with_ = With(data=data, status=status, headers=headers, options=options)
		self.dispatch(with_, w, r)
		return with_


# -----------------------------------------------------------------------------
#
# API
#
# -----------------------------------------------------------------------------


def respond(
	w: ResponseWriter,
	r: RequestInfo | None = None,
	data: Any = None,
	*,
	status: int | None = None,
	headers: THeaders | None = None,
	options: Options | None = None,
) -> With:
	"""Writes a response to `w` using `DefaultOptions`, unless other options
	are given."""
	return Responder().respond(
		w, r, data, status=status, headers=headers, options=options
	)


# EOF
