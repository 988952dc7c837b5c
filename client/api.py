"""
Posts API HTTP client.

Used endpoints:
- GET    /posts       -> {"data": [post, ...]}
- POST   /posts       -> {"message": "...", "data": post}
- PUT    /posts/{id}  -> {"message": "...", "data": post}
- DELETE /posts/{id}  -> {"message": "..."}

Network failures surface as `httpx.HTTPError`; error statuses from the API
surface as `PostsApiError`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import httpx

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_TIMEOUT_S = 30.0

logger = logging.getLogger(__name__)


class PostsApiError(RuntimeError):
    def __init__(self, status_code: int, message: str, errors: dict[str, list[str]] | None = None):
        super().__init__(f"{status_code} {message}")
        self.status_code = status_code
        self.message = message
        self.errors = errors or {}


@dataclass(frozen=True)
class Post:
    id: int
    title: str
    body: str
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Post":
        return cls(
            id=int(data["id"]),
            title=str(data["title"]),
            body=str(data["body"]),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


def base_url_from_env() -> str:
    return os.environ.get("POSTS_API_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL


def timeout_from_env() -> float:
    raw = os.environ.get("POSTS_API_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_S
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_S


def _normalize_base_url(base_url: str) -> str:
    base_url = (base_url or "").strip()
    if not base_url:
        raise ValueError("Posts API base URL is empty.")
    return base_url.rstrip("/")


class PostsApi:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = _normalize_base_url(base_url or base_url_from_env())
        self.timeout_s = timeout_s if timeout_s is not None else timeout_from_env()
        self._transport = transport

    async def _request(self, method: str, path: str, *, json: dict | None = None) -> dict[str, Any]:
        logger.debug("posts_api_request method=%s path=%s", method, path)
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_s,
            transport=self._transport,
        ) as client:
            resp = await client.request(method, path, json=json)

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if resp.status_code >= 400:
            message = str(data.get("message") or resp.text[:300] or resp.reason_phrase)
            errors = data.get("errors") if isinstance(data.get("errors"), dict) else None
            raise PostsApiError(resp.status_code, message, errors)
        return data

    async def list_posts(self) -> list[Post]:
        data = await self._request("GET", "/posts")
        return [Post.from_json(item) for item in data.get("data") or []]

    async def get_post(self, post_id: int) -> Post:
        data = await self._request("GET", f"/posts/{post_id}")
        return Post.from_json(data["data"])

    async def create_post(self, *, title: str, body: str) -> Post:
        data = await self._request("POST", "/posts", json={"title": title, "body": body})
        return Post.from_json(data["data"])

    async def update_post(self, post_id: int, *, title: str, body: str) -> Post:
        data = await self._request("PUT", f"/posts/{post_id}", json={"title": title, "body": body})
        return Post.from_json(data["data"])

    async def delete_post(self, post_id: int) -> str:
        data = await self._request("DELETE", f"/posts/{post_id}")
        return str(data.get("message") or "")
