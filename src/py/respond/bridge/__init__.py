from .wsgi import WSGIRequest, WSGIResponse, application  # NOQA: F401

# EOF
