"""
JSON API Example

Serves a small JSON API through the WSGI bridge, using the reference server
from the standard library.

Usage:
    python api.py

Test with:
    curl -i http://localhost:8000/time
    curl -i http://localhost:8000/missing
    curl -i -H "Accept: text/plain" http://localhost:8000/time
"""

import time
from typing import Any
from wsgiref.simple_server import make_server

from respond import DefaultOptions, Encoder, With
from respond.bridge.wsgi import WSGIRequest, application
from respond.utils.logging import info


class TextEncoder(Encoder):
	"""Writes values as plain text."""

	contentType = "text/plain"

	def encode(self, w: Any, data: Any) -> None:
		w.write(f"{data}\n".encode("utf8"))


options = DefaultOptions.copy()
options.encoders["text/plain"] = TextEncoder()
options.defaultHeaders.set("X-Api-Version", "1.0")


def api(request: WSGIRequest) -> With:
	if request.path == "/time":
		return With(data={"time": time.time()})
	else:
		return With(
			data={"error": "Not Found", "path": request.path},
			status=404,
			headers={"Cache-Control": "no-store"},
		)


if __name__ == "__main__":
	info("Serving API", Port=8000)
	with make_server("", 8000, application(api, options)) as server:
		server.serve_forever()

# EOF
