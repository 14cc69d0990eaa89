"""Status-code aware error handling for Flask request handlers.

Raise ``RequestError("notFound", {...})`` (or ``raise_not_found()``) from a
view and the registered handler answers with that status and body.
"""

from flask import Flask

from .config import Config
from .domain import ErrorKind, ResolverConfig, normalize_config
from .errors import RequestError, catch_middleware, classify, raise_for, register_error_handlers, resolve_error
from .errors.exceptions import (
    raise_bad_gateway,
    raise_bad_request,
    raise_conflict,
    raise_forbidden,
    raise_gateway_timeout,
    raise_gone,
    raise_internal_server_error,
    raise_method_not_allowed,
    raise_not_acceptable,
    raise_not_found,
    raise_not_implemented,
    raise_payload_too_large,
    raise_payment_required,
    raise_precondition_failed,
    raise_request_timeout,
    raise_service_unavailable,
    raise_too_many_requests,
    raise_unauthorized,
    raise_unprocessable_entity,
    raise_unsupported_media_type,
)
from .extensions import RequestErrors
from .http import FlaskResponseSink, ResponseSink
from .status import STATUS_CODES, STATUS_MESSAGES, resolve_status, status_message


def create_app(config_object=Config, **options):
    """Bare Flask app with the request error handler installed."""
    app = Flask(__name__)
    app.config.from_object(config_object)
    RequestErrors(app, **options)
    return app
