# request_errors/http.py
from typing import Any, Protocol

from flask import current_app, jsonify


class ResponseSink(Protocol):
    """What the resolver needs from the host framework's response."""

    def set_status(self, code: int) -> None: ...

    def send_json(self, value: Any) -> None: ...

    def send_text(self, value: Any) -> None: ...

    def end_stream(self) -> None: ...


class FlaskResponseSink:
    """Collects status/body and builds a Flask response from them."""

    def __init__(self):
        self.status = 200
        self.ended = False
        self._response = None

    def set_status(self, code: int) -> None:
        self.status = code

    def send_json(self, value: Any) -> None:
        try:
            self._response = jsonify(value)
        except (TypeError, ValueError):
            # keep the error's status even when its body cannot be encoded
            current_app.logger.warning("request_errors: body of type %s is not JSON serializable", type(value).__name__)
            self._response = jsonify({})

    def send_text(self, value: Any) -> None:
        if not isinstance(value, (str, bytes)):
            value = str(value)
        self._response = current_app.response_class(value, mimetype="text/plain")

    def end_stream(self) -> None:
        """Mark the response as complete.

        Flask finalizes the response as soon as the error handler returns, so
        this only records the request on ``ended``; ``finish()`` builds the
        same response either way.
        """
        self.ended = True

    def finish(self):
        resp = self._response if self._response is not None else current_app.response_class(b"")
        resp.status_code = self.status
        return resp
