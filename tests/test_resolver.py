# tests/test_resolver.py
import logging

import pytest

from request_errors import RequestError, catch_middleware, normalize_config, resolve_error

from conftest import OpaqueError, RecordingSink


def _fail_next(error):
    raise AssertionError(f"unexpected delegation of {error!r}")


def test_structured_without_body_sends_default(sink):
    resolve_error(RequestError("notFound"), sink, _fail_next, normalize_config())
    assert sink.calls == [("status", 404), ("json", {}), ("end",)]


def test_structured_with_body(sink):
    resolve_error(RequestError(404, {"message": "x"}), sink, _fail_next, normalize_config())
    assert sink.calls == [("status", 404), ("json", {"message": "x"}), ("end",)]


def test_opaque_is_delegated_without_writes(sink):
    seen = []
    err = ValueError("boom")
    result = resolve_error(err, sink, lambda e: seen.append(e) or "next", normalize_config())
    assert seen == [err]
    assert result == "next"
    assert sink.calls == []


def test_opaque_with_catch_all_sends_500_and_default(sink):
    config = normalize_config({"catchAll": True, "defaultFail": {"error": "oops"}})
    resolve_error(OpaqueError("boom"), sink, _fail_next, config)
    # the opaque error's own body attribute is never read
    assert sink.calls == [("status", 500), ("json", {"error": "oops"}), ("end",)]


def test_unresolvable_descriptor_responds_500(sink):
    resolve_error(RequestError("bogusSymbol"), sink, _fail_next, normalize_config())
    assert sink.calls[0] == ("status", 500)


def test_plain_send_path(sink):
    config = normalize_config({"json": False})
    resolve_error(RequestError("badRequest", "plain words"), sink, _fail_next, config)
    assert sink.calls == [("status", 400), ("text", "plain words"), ("end",)]


def test_plain_send_default_is_empty_string(sink):
    resolve_error(RequestError(403), sink, _fail_next, normalize_config({"json": False}))
    assert sink.calls == [("status", 403), ("text", ""), ("end",)]


def test_end_request_off(sink):
    resolve_error(RequestError(409, "x"), sink, _fail_next, normalize_config({"endRequest": False}))
    assert sink.calls == [("status", 409), ("json", "x")]


@pytest.mark.parametrize("body", ["", 0, False, [], {}])
def test_falsy_bodies_are_sent_as_given(sink, body):
    config = normalize_config({"defaultFail": {"fallback": True}})
    resolve_error(RequestError(422, body), sink, _fail_next, config)
    assert sink.calls[1] == ("json", body)


def test_logger_sees_error_before_response(sink):
    order = []
    err = RequestError(400)

    def hook(e):
        order.append(("logged", e))
        assert sink.calls == []

    resolve_error(err, sink, _fail_next, normalize_config({"logger": hook}))
    assert order == [("logged", err)]
    assert sink.calls[0] == ("status", 400)


def test_logger_sees_delegated_errors_too(sink):
    seen = []
    err = KeyError("k")
    resolve_error(err, sink, lambda e: None, normalize_config({"logger": seen.append}))
    assert seen == [err]


def test_failing_logger_does_not_block_response(sink, caplog):
    def hook(e):
        raise RuntimeError("logger down")

    with caplog.at_level(logging.ERROR, logger="request_errors"):
        resolve_error(RequestError(404), sink, _fail_next, normalize_config({"logger": hook}))
    assert sink.calls == [("status", 404), ("json", {}), ("end",)]
    assert "error logger raised" in caplog.text


def test_catch_middleware_normalizes_once():
    handler = catch_middleware({"catchAll": True, "json": "yes"})
    assert handler.config.catch_all is True
    assert handler.config.json is True

    sink = RecordingSink()
    assert handler(TypeError("t"), object(), sink, _fail_next) is None
    assert sink.calls == [("status", 500), ("json", {}), ("end",)]


def test_equivalent_configs_make_identical_decisions():
    first, second = RecordingSink(), RecordingSink()
    catch_middleware({"catchAll": True})(RequestError("gone", {"id": 1}), None, first, _fail_next)
    catch_middleware({"catch_all": True})(RequestError(410, {"id": 1}), None, second, _fail_next)
    assert first.calls == second.calls
