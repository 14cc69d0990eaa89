from typing import Any, NoReturn, Optional

from ..domain import ErrorKind
from ..status import STATUS_CODES, resolve_status, status_message

INTERNAL_SERVER_ERROR = 500


class RequestError(Exception):
    """Application error carrying the HTTP status and body of its response.

    ``status`` may be an int, a numeric string or a symbolic name from
    ``STATUS_CODES``. Anything that does not resolve becomes 500.
    """

    is_request_error = True

    def __init__(self, status: Any, body: Optional[Any] = None):
        code = resolve_status(status)
        self.code = INTERNAL_SERVER_ERROR if code is None else code
        self.body = body
        super().__init__(self.code, body)

    def __repr__(self) -> str:
        return f"RequestError(code={self.code!r}, body={self.body!r})"


def classify(error: BaseException) -> ErrorKind:
    if getattr(error, "is_request_error", False) is True and isinstance(getattr(error, "code", None), int):
        return ErrorKind.STRUCTURED
    return ErrorKind.OPAQUE


def raise_for(symbol: str, body: Optional[Any] = None) -> NoReturn:
    """Raise a RequestError for a registered symbol.

    Without a body the response carries ``{"message": <reason phrase>}``.
    """
    if symbol not in STATUS_CODES:
        raise KeyError(symbol)
    if body is None:
        body = {"message": status_message(symbol)}
    raise RequestError(symbol, body)


def _raiser(symbol: str):
    def raise_symbol(body: Optional[Any] = None) -> NoReturn:
        raise_for(symbol, body)

    raise_symbol.__name__ = raise_symbol.__qualname__ = "raise_" + "".join(
        "_" + c.lower() if c.isupper() else c for c in symbol
    )
    raise_symbol.__doc__ = f"Raise RequestError({STATUS_CODES[symbol]}) for {symbol!r}."
    return raise_symbol


raise_bad_request = _raiser("badRequest")
raise_unauthorized = _raiser("unauthorized")
raise_payment_required = _raiser("paymentRequired")
raise_forbidden = _raiser("forbidden")
raise_not_found = _raiser("notFound")
raise_method_not_allowed = _raiser("methodNotAllowed")
raise_not_acceptable = _raiser("notAcceptable")
raise_request_timeout = _raiser("requestTimeout")
raise_conflict = _raiser("conflict")
raise_gone = _raiser("gone")
raise_precondition_failed = _raiser("preconditionFailed")
raise_payload_too_large = _raiser("payloadTooLarge")
raise_unsupported_media_type = _raiser("unsupportedMediaType")
raise_unprocessable_entity = _raiser("unprocessableEntity")
raise_too_many_requests = _raiser("tooManyRequests")
raise_internal_server_error = _raiser("internalServerError")
raise_not_implemented = _raiser("notImplemented")
raise_bad_gateway = _raiser("badGateway")
raise_service_unavailable = _raiser("serviceUnavailable")
raise_gateway_timeout = _raiser("gatewayTimeout")
