import os

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_flag(raw, default):
    raw = raw.strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    return default


def env_flag(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return parse_flag(raw, default)


class Config:
    REQUEST_ERRORS_JSON = env_flag("REQUEST_ERRORS_JSON", True)
    REQUEST_ERRORS_CATCH_ALL = env_flag("REQUEST_ERRORS_CATCH_ALL", False)
    REQUEST_ERRORS_END_REQUEST = env_flag("REQUEST_ERRORS_END_REQUEST", True)
    REQUEST_ERRORS_PASS_HTTP_EXCEPTIONS = env_flag("REQUEST_ERRORS_PASS_HTTP_EXCEPTIONS", True)


# app.config key -> resolver option
APP_CONFIG_KEYS = {
    "REQUEST_ERRORS_JSON": "json",
    "REQUEST_ERRORS_CATCH_ALL": "catch_all",
    "REQUEST_ERRORS_END_REQUEST": "end_request",
    "REQUEST_ERRORS_DEFAULT_FAIL": "default_fail",
    "REQUEST_ERRORS_LOGGER": "logger",
    "REQUEST_ERRORS_PASS_HTTP_EXCEPTIONS": "pass_http_exceptions",
}

FLAG_OPTIONS = {"json", "catch_all", "end_request", "pass_http_exceptions"}


def options_from_app_config(app_config):
    """Pick the REQUEST_ERRORS_* keys that are set on a Flask config.

    Flag values set as strings ("0", "off", ...) are read like env vars;
    unparseable strings are left for the option check to reject.
    """
    options = {}
    for key, option in APP_CONFIG_KEYS.items():
        if key not in app_config:
            continue
        value = app_config[key]
        if option in FLAG_OPTIONS and isinstance(value, str):
            value = parse_flag(value, value)
        options[option] = value
    return options
