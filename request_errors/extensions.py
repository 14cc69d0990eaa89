from .config import options_from_app_config
from .domain import canonical_options
from .errors.handlers import register_error_handlers


class RequestErrors:
    """Flask extension wiring the request error handler into an app.

    Keyword options override the app's REQUEST_ERRORS_* config keys.
    Created once and initialized in the app factory, like the other
    Flask extensions::

        request_errors = RequestErrors(catch_all=True)
        request_errors.init_app(app)
    """

    def __init__(self, app=None, **options):
        self.options = options
        self.handler = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        options = options_from_app_config(app.config)
        options.update(canonical_options(self.options))
        pass_http_exceptions = options.pop("pass_http_exceptions", None)
        self.handler = register_error_handlers(app, options, pass_http_exceptions=pass_http_exceptions)
        app.extensions["request_errors"] = self
        return self.handler

    @property
    def config(self):
        return self.handler.config if self.handler is not None else None
