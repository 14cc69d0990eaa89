# request_errors/domain.py
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

logger = logging.getLogger(__name__)

ErrorLogger = Callable[[BaseException], None]

# camelCase option names first, snake_case spellings second
_OPTION_ALIASES = {
    "json": ("json",),
    "catch_all": ("catchAll", "catch_all"),
    "end_request": ("endRequest", "end_request"),
    "default_fail": ("defaultFail", "defaultBody", "default_fail", "default_body"),
    "logger": ("logger",),
    "pass_http_exceptions": ("passHttpExceptions", "pass_http_exceptions"),
}
_ALIAS_KEYS = {key for keys in _OPTION_ALIASES.values() for key in keys}

_UNSET = object()


class ErrorKind(Enum):
    """How the resolver treats a raised error."""

    STRUCTURED = "structured"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class ResolverConfig:
    """
    Error handler 設定（normalize 後不可變）
    """
    json: bool = True
    catch_all: bool = False
    end_request: bool = True
    default_fail: Any = field(default_factory=dict)
    logger: Optional[ErrorLogger] = None


def _pick(options: Mapping[str, Any], name: str) -> Any:
    for key in _OPTION_ALIASES[name]:
        if key in options:
            return options[key]
    return _UNSET


def canonical_options(options: Mapping[str, Any]) -> dict:
    """Rename aliased keys (catchAll, defaultBody, ...) to their snake_case option names."""
    canonical = {key: value for key, value in options.items() if key not in _ALIAS_KEYS}
    for name in _OPTION_ALIASES:
        value = _pick(options, name)
        if value is not _UNSET:
            canonical[name] = value
    return canonical


def option_flag(options: Mapping[str, Any], name: str, default: bool) -> bool:
    value = _pick(options, name)
    if value is _UNSET:
        return default
    if not isinstance(value, bool):
        logger.warning("request_errors: option %r is not a bool (%r), using %r", name, value, default)
        return default
    return value


def normalize_config(options: Union[ResolverConfig, Mapping[str, Any], None] = None) -> ResolverConfig:
    """Fill in defaults for every option that is missing or of the wrong type."""
    if isinstance(options, ResolverConfig):
        return options
    if options is None:
        options = {}
    elif not isinstance(options, Mapping):
        logger.warning("request_errors: ignoring config of type %s", type(options).__name__)
        options = {}

    as_json = option_flag(options, "json", True)

    default_fail = _pick(options, "default_fail")
    if default_fail is _UNSET or default_fail is None:
        default_fail = {} if as_json else ""

    error_logger = _pick(options, "logger")
    if error_logger is _UNSET or error_logger is None:
        error_logger = None
    elif not callable(error_logger):
        logger.warning("request_errors: logger %r is not callable, ignored", error_logger)
        error_logger = None

    return ResolverConfig(
        json=as_json,
        catch_all=option_flag(options, "catch_all", False),
        end_request=option_flag(options, "end_request", True),
        default_fail=default_fail,
        logger=error_logger,
    )
