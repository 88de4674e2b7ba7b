from respond.headers import Headers, headername


def test_headername_normalizes_case():
	assert headername("content-type") == "Content-Type"
	assert headername("X-REQUEST-ID") == "X-Request-Id"
	assert headername("Accept") == "Accept"


def test_values_keep_insertion_order():
	headers = Headers()
	headers.add("Vary", "Accept").add("x-a", "1").add("vary", "Origin")
	assert headers.keys() == ["Vary", "X-A"]
	assert headers.getAll("VARY") == ["Accept", "Origin"]
	assert headers.get("Vary") == "Accept"
	assert list(headers.items()) == [
		("Vary", "Accept"),
		("Vary", "Origin"),
		("X-A", "1"),
	]


def test_remove_and_set():
	headers = Headers.From({"X-A": ["1", "2"], "X-B": "3"})
	headers.remove("x-a")
	assert "X-A" not in headers
	assert headers.getAll("X-A") == []
	assert headers.get("X-A") is None
	headers.set("X-B", 4)
	assert headers.getAll("X-B") == ["4"]
	# Removing a missing header is not an error
	headers.remove("X-Missing")
	assert len(headers) == 1


def test_from_accepts_pairs_and_copies():
	source = Headers.From([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])
	assert source.getAll("Set-Cookie") == ["a=1", "b=2"]
	copy = Headers.From(source)
	copy.add("Set-Cookie", "c=3")
	assert source.getAll("Set-Cookie") == ["a=1", "b=2"]
	assert copy == Headers.From({"set-cookie": ["a=1", "b=2", "c=3"]})
	assert not Headers.From(None)



def test_from_keeps_names_without_values_and_int_values():
	headers = Headers.From({"X-Empty": [], "Content-Length": 5})
	assert headers.has("X-Empty")
	assert headers.getAll("X-Empty") == []
	assert headers.get("X-Empty") is None
	assert headers.getAll("Content-Length") == ["5"]
	assert list(headers.items()) == [("Content-Length", "5")]


# EOF
