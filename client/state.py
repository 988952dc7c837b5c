"""
Client-side UI state.

`BoardState` is the whole state of the screen. `PostBoard` owns one and is the
only thing that mutates it. The list is never patched locally; every change is
followed by a full refetch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .api import Post, PostsApi

EMPTY_FIELDS_ALERT = "Fill all fields"
DELETE_CONFIRM_PROMPT = "Delete this post?"


@dataclass
class BoardState:
    posts: list[Post] = field(default_factory=list)
    title: str = ""
    body: str = ""
    editing_id: int | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None


class PostBoard:
    def __init__(
        self,
        api: PostsApi,
        *,
        confirm: Callable[[str], bool],
        alert: Callable[[str], None],
    ):
        self.api = api
        self.state = BoardState()
        self._confirm = confirm
        self._alert = alert

    @property
    def form_heading(self) -> str:
        return "Edit Post" if self.state.is_editing else "Create Post"

    @property
    def submit_label(self) -> str:
        return "Update Post" if self.state.is_editing else "Add Post"

    def set_title(self, title: str) -> None:
        self.state.title = title

    def set_body(self, body: str) -> None:
        self.state.body = body

    def find(self, post_id: int) -> Post | None:
        for post in self.state.posts:
            if post.id == post_id:
                return post
        return None

    async def refresh(self) -> None:
        self.state.posts = await self.api.list_posts()

    async def submit(self) -> bool:
        """
        Create or update depending on mode. Returns False when blocked.
        """
        if not self.state.title or not self.state.body:
            self._alert(EMPTY_FIELDS_ALERT)
            return False

        if self.state.editing_id is not None:
            await self.api.update_post(
                self.state.editing_id,
                title=self.state.title,
                body=self.state.body,
            )
            self.state.editing_id = None
        else:
            await self.api.create_post(title=self.state.title, body=self.state.body)

        self.state.title = ""
        self.state.body = ""
        await self.refresh()
        return True

    def edit(self, post: Post) -> None:
        self.state.editing_id = post.id
        self.state.title = post.title
        self.state.body = post.body

    def cancel_edit(self) -> None:
        self.state.editing_id = None
        self.state.title = ""
        self.state.body = ""

    async def delete(self, post_id: int) -> bool:
        if not self._confirm(DELETE_CONFIRM_PROMPT):
            return False
        await self.api.delete_post(post_id)
        await self.refresh()
        return True
