from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from core import errors


def test_validation_errors_group_by_field():
    grouped = errors.validation_errors(
        [
            {"type": "missing", "loc": ("body", "title"), "msg": "Field required"},
            {"type": "string_too_long", "loc": ("body", "title"), "msg": "too long", "ctx": {"max_length": 255}},
            {"type": "missing", "loc": ("body", "body"), "msg": "Field required"},
            {"type": "missing", "loc": ("body", "body"), "msg": "Field required"},
        ]
    )
    assert grouped == {
        "title": [
            "The title field is required.",
            "The title field must not be greater than 255 characters.",
        ],
        "body": ["The body field is required."],
    }


def test_whole_body_errors_use_payload_key():
    grouped = errors.validation_errors([{"type": "missing", "loc": ("body",), "msg": "Field required"}])
    assert grouped == {"payload": ["The request body is required."]}


def test_unknown_error_type_falls_back_to_pydantic_message():
    grouped = errors.validation_errors([{"type": "value_error", "loc": ("body", "title"), "msg": "Value error, nope"}])
    assert grouped == {"title": ["Value error, nope"]}


def test_validation_summary():
    assert errors.validation_summary({}) == "The given data was invalid."
    assert errors.validation_summary({"a": ["one"]}) == "one"
    assert errors.validation_summary({"a": ["one", "two"], "b": ["three"]}) == "one (and 2 more errors)"


def _app() -> FastAPI:
    app = FastAPI()
    errors.install(app)

    class Payload(BaseModel):
        name: str = Field(..., min_length=1)

    @app.post("/echo")
    def echo(payload: Payload) -> dict:
        return {"name": payload.name}

    @app.get("/boom")
    def boom() -> dict:
        raise RuntimeError("storage exploded")

    return app


def test_request_validation_envelope():
    client = TestClient(_app())
    resp = client.post("/echo", json={"name": ""})
    assert resp.status_code == 422
    assert resp.json() == {
        "message": "The name field is required.",
        "errors": {"name": ["The name field is required."]},
    }


def test_unhandled_errors_become_generic_500():
    client = TestClient(_app(), raise_server_exceptions=False)
    resp = client.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Server Error"}
