"""
Shared fixtures.

The API tests never touch PostgreSQL: `store` swaps the functions in
`posts.repository` for an in-memory table with the same behavior.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from posts import repository


class FakePostStore:
    def __init__(self):
        self.rows: dict[int, dict] = {}
        self._next_id = 1
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _now(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    async def ensure_table(self) -> None:
        return None

    async def list_posts(self) -> list[dict]:
        return [dict(self.rows[k]) for k in sorted(self.rows)]

    async def create_post(self, *, title: str, body: str) -> dict:
        now = self._now()
        row = {
            "id": self._next_id,
            "title": title,
            "body": body,
            "created_at": now,
            "updated_at": now,
        }
        self.rows[self._next_id] = row
        self._next_id += 1
        return dict(row)

    async def get_post(self, post_id: int) -> dict | None:
        row = self.rows.get(post_id)
        return dict(row) if row is not None else None

    async def update_post(self, post_id: int, *, title: str, body: str) -> dict | None:
        row = self.rows.get(post_id)
        if row is None:
            return None
        row.update(title=title, body=body, updated_at=self._now())
        return dict(row)

    async def delete_post(self, post_id: int) -> bool:
        return self.rows.pop(post_id, None) is not None


@pytest.fixture
def store(monkeypatch) -> FakePostStore:
    fake = FakePostStore()
    for name in ("ensure_table", "list_posts", "create_post", "get_post", "update_post", "delete_post"):
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def client(store) -> TestClient:
    # Not used as a context manager, so the DB lifespan never runs.
    from main import app

    return TestClient(app)
