from typing import Any

import pytest

from respond import DefaultOptions, EncodingError, With
from respond.bridge.wsgi import WSGIRequest, application, statusLine


class StartResponse:
	def __init__(self) -> None:
		self.calls: list[tuple[str, list[tuple[str, str]]]] = []

	def __call__(self, status: str, headers: list[tuple[str, str]]) -> Any:
		self.calls.append((status, headers))


def environ(**headers: str) -> dict[str, Any]:
	res: dict[str, Any] = {"REQUEST_METHOD": "GET", "PATH_INFO": "/items"}
	res.update(headers)
	return res


def test_status_line():
	assert statusLine(200) == "200 OK"
	assert statusLine(201) == "201 Created"
	assert statusLine(599) == "599 Unknown Status"


def test_request_reads_environ_headers():
	r = WSGIRequest(
		environ(HTTP_ACCEPT="application/json", CONTENT_TYPE="text/plain")
	)
	assert r.header("Accept") == "application/json"
	assert r.header("content-type") == "text/plain"
	assert r.header("X-Missing") is None
	assert r.method == "GET"
	assert r.path == "/items"


def test_application_dispatches_handler_response():
	options = DefaultOptions.copy()
	options.defaultHeaders.add("X-App", "test")
	app = application(
		lambda request: With(
			data={"path": request.path}, status=201, headers={"X-Id": "1"}
		),
		options,
	)
	start = StartResponse()
	body = b"".join(app(environ(HTTP_ACCEPT="application/json"), start))
	assert body == b'{"path":"/items"}\n'
	assert len(start.calls) == 1
	status, headers = start.calls[0]
	assert status == "201 Created"
	assert headers == [
		("X-App", "test"),
		("X-Id", "1"),
		("Content-Type", "application/json"),
	]


def test_application_without_data():
	app = application(lambda request: With(status=204))
	start = StartResponse()
	assert list(app(environ(), start)) == []
	assert start.calls == [("204 No Content", [])]


def test_application_propagates_encoding_errors(logs):
	app = application(lambda request: With(data=object()))
	with pytest.raises(EncodingError):
		app(environ(), StartResponse())
	assert "Could not encode response to /items" in logs.getvalue()


# EOF
