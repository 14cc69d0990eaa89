import logging
from typing import Any, Callable, Mapping, Optional, Union

from flask import current_app, request
from werkzeug.exceptions import HTTPException

from ..config import options_from_app_config
from ..domain import ErrorKind, ResolverConfig, normalize_config, option_flag
from ..http import FlaskResponseSink, ResponseSink
from .exceptions import INTERNAL_SERVER_ERROR, classify

logger = logging.getLogger(__name__)

NextHandler = Callable[[BaseException], Any]


def _log_error(config: ResolverConfig, error: BaseException) -> None:
    if config.logger is None:
        return
    try:
        config.logger(error)
    except Exception:
        # the hook must not decide the response
        logger.exception("request_errors: error logger raised")


def resolve_error(
    error: BaseException,
    sink: ResponseSink,
    next_handler: NextHandler,
    config: ResolverConfig,
) -> Any:
    """Turn ``error`` into a response on ``sink`` or hand it to ``next_handler``.

    Returns whatever ``next_handler`` returned when the error was delegated,
    otherwise None.
    """
    _log_error(config, error)

    kind = classify(error)
    if kind is ErrorKind.STRUCTURED:
        sink.set_status(error.code)
        body = error.body
    elif config.catch_all:
        sink.set_status(INTERNAL_SERVER_ERROR)
        body = None
    else:
        logger.debug("request_errors: delegating %s", type(error).__name__)
        return next_handler(error)

    if body is None:
        body = config.default_fail

    logger.debug("request_errors: responding %s for %s", kind.value, type(error).__name__)
    if config.json:
        sink.send_json(body)
    else:
        sink.send_text(body)

    if config.end_request:
        sink.end_stream()
    return None


def catch_middleware(config: Union[ResolverConfig, Mapping[str, Any], None] = None):
    """Build an ``(error, request, sink, next_handler)`` error handler.

    Options are normalized once here; the returned handler never changes them.
    """
    resolved = normalize_config(config)

    def handler(error: BaseException, req: Any, sink: ResponseSink, next_handler: NextHandler) -> Any:
        return resolve_error(error, sink, next_handler, resolved)

    handler.config = resolved
    return handler


def _delegate(e: BaseException):
    # HTTPException is already a response; anything else goes back to Flask
    if isinstance(e, HTTPException):
        return e
    raise e


def register_error_handlers(app, config: Optional[Union[ResolverConfig, Mapping[str, Any]]] = None,
                            pass_http_exceptions: Optional[bool] = None):
    """Register the request error handler on a Flask app.

    Without ``config`` the ``REQUEST_ERRORS_*`` keys of ``app.config`` are used.
    Werkzeug HTTP exceptions (routing 404, ``abort()``) skip the resolver while
    ``pass_http_exceptions`` is on.
    """
    app_options = options_from_app_config(app.config)
    if pass_http_exceptions is not None:
        app_options["pass_http_exceptions"] = pass_http_exceptions
    pass_http_exceptions = option_flag(app_options, "pass_http_exceptions", True)
    app_options.pop("pass_http_exceptions", None)
    handler = catch_middleware(app_options if config is None else config)

    @app.errorhandler(Exception)
    def handle_request_error(e: Exception):
        if pass_http_exceptions and isinstance(e, HTTPException):
            return e

        sink = FlaskResponseSink()
        delegated = handler(e, request, sink, _delegate)
        if sink.status == INTERNAL_SERVER_ERROR and classify(e) is ErrorKind.OPAQUE:
            current_app.logger.exception("Unhandled error")
        if delegated is not None:
            return delegated
        return sink.finish()

    return handler
