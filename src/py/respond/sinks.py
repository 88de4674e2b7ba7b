from .headers import Headers, THeaders
from .model import RequestInfo, ResponseWriter
from .utils.json import TJSON, unjson
from .config import DEFAULT_ENCODING

# -----------------------------------------------------------------------------
#
# IN-MEMORY
#
# -----------------------------------------------------------------------------
# --
# In-memory request and response writer, useful to render responses outside
# of a server, and to test handlers.


class RequestHeaders(RequestInfo):
	"""A request that only has headers."""

	__slots__ = ["headers"]

	def __init__(self, headers: THeaders | None = None) -> None:
		self.headers: Headers = Headers.From(headers)

	def header(self, name: str) -> str | None:
		return self.headers.get(name)

	@staticmethod
	def Accepting(contentType: str) -> "RequestHeaders":
		return RequestHeaders({"Accept": contentType})


class ResponseRecorder(ResponseWriter):
	"""Records the status, headers and body written to it. Headers added
	after the response is committed are kept in `headers` but not in
	`committedHeaders`."""

	__slots__ = ["body", "committedHeaders"]

	def __init__(self) -> None:
		super().__init__()
		self.body: bytearray = bytearray()
		self.committedHeaders: Headers | None = None

	def _commit(self, status: int) -> None:
		self.committedHeaders = self.headers.copy()

	def _write(self, chunk: bytes) -> int:
		self.body += chunk
		return len(chunk)

	@property
	def text(self) -> str:
		return self.body.decode(DEFAULT_ENCODING)

	def json(self) -> TJSON:
		return unjson(bytes(self.body))

	def header(self, name: str) -> str | None:
		return (
			self.headers if self.committedHeaders is None else self.committedHeaders
		).get(name)

	def __repr__(self) -> str:
		return f"ResponseRecorder({self.status} {self.committedHeaders} {bytes(self.body)!r})"


# EOF
