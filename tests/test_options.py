from respond import DefaultOptions, JSON, Options, createOptions
from respond import config
from respond.encoders import JSONEncoder
from respond.headers import Headers
from respond.policy import (
	selectEncoder,
	setHeadersAggregate,
	setHeadersOverride,
	writeData,
	writeHeader,
)


def test_default_options():
	assert DefaultOptions.defaultStatus == 200
	assert DefaultOptions.defaultEncoder is JSON
	assert DefaultOptions.encoders == {"application/json": JSON}
	assert DefaultOptions.setHeaders is setHeadersOverride
	assert DefaultOptions.writeHeader is writeHeader
	assert DefaultOptions.writeData is writeData
	assert DefaultOptions.encoder is selectEncoder
	assert not DefaultOptions.defaultHeaders
	assert DefaultOptions.validate() is DefaultOptions


def test_copy_is_independent():
	original = DefaultOptions.copy()
	original.defaultHeaders.add("X-Version", "1")
	copy = original.copy()
	copy.defaultStatus = 500
	copy.defaultEncoder = JSONEncoder()
	copy.setHeaders = setHeadersAggregate
	copy.encoders["text/plain"] = JSON
	copy.defaultHeaders.add("X-Version", "2")
	copy.defaultHeaders = Headers()
	assert original.defaultStatus == 200
	assert original.defaultEncoder is JSON
	assert original.setHeaders is setHeadersOverride
	assert list(original.encoders) == ["application/json"]
	assert original.defaultHeaders.getAll("X-Version") == ["1"]


def test_copy_shares_encoders_and_functions():
	copy = DefaultOptions.copy()
	assert copy.defaultEncoder is DefaultOptions.defaultEncoder
	assert copy.encoders["application/json"] is DefaultOptions.encoders["application/json"]
	assert copy.writeHeader is DefaultOptions.writeHeader


def test_create_options_reads_config(monkeypatch):
	monkeypatch.setattr(config, "DEFAULT_STATUS", 202)
	monkeypatch.setattr(config, "HEADERS", "aggregate")
	options = createOptions()
	assert options.defaultStatus == 202
	assert options.setHeaders is setHeadersAggregate
	options = createOptions(defaultStatus=201, policy="Override")
	assert options.defaultStatus == 201
	assert options.setHeaders is setHeadersOverride


def test_create_options_with_unknown_policy(logs):
	options = createOptions(policy="merge")
	assert options.setHeaders is setHeadersOverride
	assert "Unknown header policy" in logs.getvalue()


def test_empty_options_are_invalid():
	options = Options()
	assert options.encoders == {}
	assert options.defaultStatus == 200
	try:
		options.validate()
	except RuntimeError as e:
		assert "writeHeader" in str(e)
	else:
		raise AssertionError("Options without functions should not validate")


# EOF
