# request_errors/status.py
"""Symbolic status names -> HTTP status codes.

Handlers raise errors by name (``"notFound"``) while Werkzeug wants an
integer status, so names are resolved here.
"""

import math
from types import MappingProxyType
from typing import Any, Optional

from werkzeug.http import HTTP_STATUS_CODES


STATUS_CODES = MappingProxyType({
    "badRequest": 400,
    "unauthorized": 401,
    "paymentRequired": 402,
    "forbidden": 403,
    "notFound": 404,
    "methodNotAllowed": 405,
    "notAcceptable": 406,
    "requestTimeout": 408,
    "conflict": 409,
    "gone": 410,
    "preconditionFailed": 412,
    "payloadTooLarge": 413,
    "unsupportedMediaType": 415,
    "unprocessableEntity": 422,
    "tooManyRequests": 429,
    "internalServerError": 500,
    "notImplemented": 501,
    "badGateway": 502,
    "serviceUnavailable": 503,
    "gatewayTimeout": 504,
})

# reason phrases come from werkzeug so they match the status line
STATUS_MESSAGES = MappingProxyType({
    symbol: HTTP_STATUS_CODES[code] for symbol, code in STATUS_CODES.items()
})


def _as_number(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            # past the float range counts as infinite
            return None
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return int(number)


def resolve_status(descriptor: Any) -> Optional[int]:
    """
    數字 / 數字字串直接使用，其餘視為 registry 名稱；無法解析回傳 None
    """
    number = _as_number(descriptor)
    if number is not None:
        return number
    if isinstance(descriptor, str):
        return STATUS_CODES.get(descriptor)
    return None


def status_message(symbol: str) -> Optional[str]:
    return STATUS_MESSAGES.get(symbol)
