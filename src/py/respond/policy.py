from typing import Any

from .encoders import Encoder
from .headers import Headers
from .model import Ctx, OptionsError, TSetHeaders

# -----------------------------------------------------------------------------
#
# HEADERS
#
# -----------------------------------------------------------------------------
# --
# Default headers are always written first, explicit headers are then either
# replacing the defaults with the same name (override) or appended after
# them (aggregate).


def setHeaders(c: Ctx, override: bool) -> None:
	"""Adds the default headers and then the explicit headers of the response
	to the writer's headers, optionally overriding the defaults."""
	headers: Headers = c.w.headers
	for name, values in c.options.defaultHeaders.groups():
		for value in values:
			headers.add(name, value)
	explicit = c.with_.headers
	if not explicit:
		return None
	for name, values in Headers.From(explicit).groups():
		if override:
			headers.remove(name)
		for value in values:
			headers.add(name, value)


def setHeadersOverride(c: Ctx) -> None:
	"""Explicit headers replace default headers with the same name."""
	setHeaders(c, True)


def setHeadersAggregate(c: Ctx) -> None:
	"""Explicit headers are added after default headers with the same name."""
	setHeaders(c, False)


HEADER_POLICIES: dict[str, TSetHeaders] = {
	"override": setHeadersOverride,
	"aggregate": setHeadersAggregate,
}

# -----------------------------------------------------------------------------
#
# ENCODERS
#
# -----------------------------------------------------------------------------


def selectEncoder(c: Ctx) -> Encoder | None:
	"""Returns the first registered encoder whose content type is contained
	in the request's `Accept` header, or the default encoder."""
	# NOTE: This is plain substring matching, quality values and wildcards
	# are not interpreted.
	accept: str = (c.r.header("Accept") if c.r is not None else None) or ""
	if accept:
		for contentType, encoder in c.options.encoders.items():
			if contentType in accept:
				return encoder
	return c.options.defaultEncoder


def resolveEncoder(c: Ctx) -> Encoder:
	"""Returns the encoder for the response, selecting it only once per
	context."""
	if c.selected is None:
		select = c.options.encoder
		encoder = select(c) if select else None
		if encoder is None:
			raise OptionsError("No encoder could be selected, set a default encoder")
		c.selected = encoder
	return c.selected


# -----------------------------------------------------------------------------
#
# WRITING
#
# -----------------------------------------------------------------------------


def writeHeader(c: Ctx, status: int) -> None:
	"""Sets the headers and commits them along with the status. When there
	is data and no `Content-Type` was given, the encoder is selected now so
	that its content type can be sent."""
	set_headers = c.options.setHeaders
	if set_headers is None:
		raise OptionsError("Options have no setHeaders function", ["setHeaders"])
	set_headers(c)
	if c.with_.data is not None and not c.w.headers.has("Content-Type"):
		c.w.headers.set("Content-Type", resolveEncoder(c).contentType)
	c.w.writeHeader(status)


def writeData(c: Ctx, data: Any) -> None:
	"""Encodes the data to the writer using the negotiated encoder."""
	resolveEncoder(c).encode(c.w, data)


# EOF
