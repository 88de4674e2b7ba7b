from .headers import Headers, headername  # NOQA: F401
from .encoders import Encoder, EncodingError, JSONEncoder, JSON  # NOQA: F401
from .model import (
	Ctx,
	Options,
	OptionsError,
	RequestInfo,
	ResponseWriter,
)  # NOQA: F401
from .policy import (
	selectEncoder,
	setHeadersAggregate,
	setHeadersOverride,
)  # NOQA: F401
from .dispatch import (
	DefaultOptions,
	Responder,
	With,
	createOptions,
	respond,
)  # NOQA: F401
from .sinks import RequestHeaders, ResponseRecorder  # NOQA: F401


# EOF
