# tests/conftest.py
import pytest
from flask import abort

from request_errors import Config, RequestError, create_app, raise_not_found


class RecordingSink:
    """ResponseSink that only remembers what was asked of it."""

    def __init__(self):
        self.calls = []

    def set_status(self, code):
        self.calls.append(("status", code))

    def send_json(self, value):
        self.calls.append(("json", value))

    def send_text(self, value):
        self.calls.append(("text", value))

    def end_stream(self):
        self.calls.append(("end",))


class OpaqueError(RuntimeError):
    body = {"leaked": True}


def _add_routes(app):
    @app.route("/status/<descriptor>")
    def by_status(descriptor):
        raise RequestError(descriptor)

    @app.route("/with-body")
    def with_body():
        raise RequestError(404, {"message": "x"})

    @app.route("/text")
    def text_body():
        raise RequestError("badRequest", "plain words")

    @app.route("/helper")
    def helper():
        raise_not_found()

    @app.route("/unencodable")
    def unencodable():
        raise RequestError(400, object())

    @app.route("/opaque")
    def opaque():
        raise OpaqueError("boom")

    @app.route("/abort")
    def aborted():
        abort(404)

    @app.route("/ok")
    def ok():
        return {"ok": True}


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_app():
    def factory(config_object=Config, testing=False, **options):
        app = create_app(config_object, **options)
        app.config["TESTING"] = testing
        _add_routes(app)
        return app

    return factory


@pytest.fixture
def client(make_app):
    return make_app().test_client()
