from io import StringIO
from typing import Iterator

import pytest

from respond.utils import logging


@pytest.fixture
def logs() -> Iterator[StringIO]:
	"""Captures what is logged while the test runs."""
	stream = StringIO()
	previous = logging.setErrorStream(stream)
	try:
		yield stream
	finally:
		logging.setErrorStream(previous)


# EOF
