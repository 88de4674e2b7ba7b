from http import HTTPStatus
from typing import Any, Callable, Iterable, TypeAlias

from ..dispatch import Responder, With
from ..encoders import EncodingError
from ..model import Options, RequestInfo, ResponseWriter
from ..utils.logging import exception

# --
# ## WSGI Bridge
#
# Adapts a WSGI environ and `start_response` callable to the request and
# response writer that responses are dispatched to.

# SEE: https://peps.python.org/pep-3333/

TEnviron: TypeAlias = dict[str, Any]
TStartResponse: TypeAlias = Callable[[str, list[tuple[str, str]]], Any]
TApplication: TypeAlias = Callable[[TEnviron, TStartResponse], Iterable[bytes]]

# These are not prefixed with `HTTP_` in the environ
ENVIRON_HEADERS: dict[str, str] = {
	"CONTENT_TYPE": "Content-Type",
	"CONTENT_LENGTH": "Content-Length",
}


def statusLine(status: int) -> str:
	"""Returns the WSGI status line for the given code, as `200 OK`."""
	try:
		message = HTTPStatus(status).phrase
	except ValueError:
		message = "Unknown Status"
	return f"{status} {message}"


class WSGIRequest(RequestInfo):
	"""Exposes the headers of a WSGI environ."""

	__slots__ = ["environ"]

	def __init__(self, environ: TEnviron) -> None:
		self.environ: TEnviron = environ

	@property
	def method(self) -> str:
		return str(self.environ.get("REQUEST_METHOD", "GET"))

	@property
	def path(self) -> str:
		return str(self.environ.get("PATH_INFO", "/"))

	def header(self, name: str) -> str | None:
		key = name.upper().replace("-", "_")
		value = self.environ.get(key if key in ENVIRON_HEADERS else f"HTTP_{key}")
		return None if value is None else str(value)


class WSGIResponse(ResponseWriter):
	"""Commits the status and headers through `start_response`, and buffers
	the body chunks that are then returned to the server."""

	__slots__ = ["startResponse", "body"]

	def __init__(self, startResponse: TStartResponse) -> None:
		super().__init__()
		self.startResponse: TStartResponse = startResponse
		self.body: list[bytes] = []

	def _commit(self, status: int) -> None:
		self.startResponse(statusLine(status), list(self.headers.items()))

	def _write(self, chunk: bytes) -> int:
		self.body.append(chunk)
		return len(chunk)


def application(
	handler: Callable[[WSGIRequest], With], options: Options | None = None
) -> TApplication:
	"""Creates a WSGI application where `handler` returns the description of
	the response to each request."""
	responder = Responder(options)

	def wsgi(environ: TEnviron, startResponse: TStartResponse) -> Iterable[bytes]:
		request = WSGIRequest(environ)
		response = WSGIResponse(startResponse)
		try:
			responder.dispatch(handler(request), response, request)
		except EncodingError as e:
			# The WSGI server takes care of the error response, if the
			# headers were not already sent.
			raise exception(e, f"Could not encode response to {request.path}")
		return response.body

	return wsgi


# EOF
