"""
PostsApi against an httpx.MockTransport.
"""

from __future__ import annotations

import json

import httpx
import pytest

from client.api import Post, PostsApi, PostsApiError

POST_JSON = {
    "id": 1,
    "title": "A",
    "body": "B",
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-01-01T00:00:00Z",
}


def _api(handler) -> PostsApi:
    return PostsApi("http://posts.test/", timeout_s=5, transport=httpx.MockTransport(handler))


async def test_list_posts_parses_data_array():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        return httpx.Response(200, json={"data": [POST_JSON]})

    posts = await _api(handler).list_posts()
    assert posts == [Post.from_json(POST_JSON)]
    assert seen == [("GET", "/posts")]


async def test_create_and_update_send_title_and_body():
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append((request.method, request.url.path, json.loads(request.content)))
        status = 201 if request.method == "POST" else 200
        return httpx.Response(status, json={"message": "ok", "data": POST_JSON})

    api = _api(handler)
    created = await api.create_post(title="A", body="B")
    updated = await api.update_post(1, title="A2", body="B")
    assert created.id == 1
    assert updated.id == 1
    assert bodies == [
        ("POST", "/posts", {"title": "A", "body": "B"}),
        ("PUT", "/posts/1", {"title": "A2", "body": "B"}),
    ]


async def test_delete_returns_message():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "DELETE"
        return httpx.Response(200, json={"message": "Post deleted successfully"})

    assert await _api(handler).delete_post(3) == "Post deleted successfully"


async def test_not_found_raises_api_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Post not found."})

    with pytest.raises(PostsApiError) as info:
        await _api(handler).get_post(9)
    assert info.value.status_code == 404
    assert info.value.message == "Post not found."


async def test_validation_error_carries_field_messages():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            422,
            json={"message": "The title field is required.", "errors": {"title": ["The title field is required."]}},
        )

    with pytest.raises(PostsApiError) as info:
        await _api(handler).create_post(title="", body="B")
    assert info.value.errors == {"title": ["The title field is required."]}


async def test_transport_failure_propagates():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.HTTPError):
        await _api(handler).list_posts()


def test_base_url_defaults_from_env(monkeypatch):
    monkeypatch.setenv("POSTS_API_BASE_URL", "http://api.example:9000/")
    assert PostsApi().base_url == "http://api.example:9000"


def test_timeout_env_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("POSTS_API_TIMEOUT", "soon")
    assert PostsApi("http://x").timeout_s == 30.0
