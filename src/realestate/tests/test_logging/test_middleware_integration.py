# src/realestate/tests/test_logging/test_middleware_integration.py
import json
import logging

from fastapi import FastAPI
from starlette.testclient import TestClient

from realestate.config import Settings
from realestate.core.logging.builder import setup_logging
from realestate.core.logging.middleware import REQUEST_ID_HEADER, RequestIDMiddleware, resolve_request_id


def make_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/hello")
    def hello():
        logging.getLogger("realestate").info("handling hello")
        return {"ok": True}

    return app


def test_request_id_in_response_and_logs_stdout(capsys):
    setup_logging(Settings(LOG_FORMAT="json", LOG_LEVEL="INFO", LOG_TO_STDOUT=True, ENV="production"))

    resp = TestClient(make_app()).get("/hello")
    assert resp.status_code == 200

    rid = resp.headers.get(REQUEST_ID_HEADER)
    assert rid is not None

    captured = capsys.readouterr()
    output = (captured.out + captured.err).strip()
    assert output, "Expected logs on stdout/stderr but nothing was captured."

    found = False
    for line in output.splitlines():
        try:
            rec = json.loads(line)
        except ValueError:
            continue
        if rec.get("request_id") == rid and rec.get("message") == "handling hello":
            found = True
            break

    assert found, "No log line with the response's request id"


def test_incoming_request_id_is_echoed():
    resp = TestClient(make_app()).get("/hello", headers={REQUEST_ID_HEADER: "client-42"})

    assert resp.headers[REQUEST_ID_HEADER] == "client-42"


def test_unsafe_request_id_is_replaced():
    assert resolve_request_id("bad id\nwith newline") != "bad id\nwith newline"
    assert resolve_request_id(None)
    assert resolve_request_id("ok-123") == "ok-123"
