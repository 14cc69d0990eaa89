from .exceptions import RequestError, classify, raise_for
from .handlers import catch_middleware, register_error_handlers, resolve_error

__all__ = [
    "RequestError",
    "catch_middleware",
    "classify",
    "raise_for",
    "register_error_handlers",
    "resolve_error",
]
