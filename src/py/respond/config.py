from os import getenv

DEFAULT_ENCODING: str = "utf8"

# Status written when a response doesn't specify one
DEFAULT_STATUS: int = int(getenv("RESPOND_DEFAULT_STATUS", 200))

# Either `override` or `aggregate`, see `respond.policy`
HEADERS: str = getenv("RESPOND_HEADERS", "override").lower()

# Name of the minimum `LogLevel` that gets written out
LOG_LEVEL: str = getenv("RESPOND_LOG_LEVEL", "Info")

# EOF
