"""
Rich rendering and the interactive command loop.
"""

from __future__ import annotations

import logging
from typing import Callable

import httpx
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from .api import PostsApi, PostsApiError
from .state import PostBoard

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "[bold]t[/bold] title  [bold]b[/bold] body  [bold]s[/bold] submit  "
    "[bold]e <id>[/bold] edit  [bold]c[/bold] cancel  [bold]d <id>[/bold] delete  "
    "[bold]r[/bold] refresh  [bold]q[/bold] quit"
)

Ask = Callable[[str], str]


def render_form(board: PostBoard) -> Panel:
    state = board.state
    text = Text()
    text.append("Title: ", style="bold")
    text.append(state.title or "-", style="" if state.title else "dim")
    text.append("\nBody:  ", style="bold")
    text.append(state.body or "-", style="" if state.body else "dim")
    text.append(f"\n\n[s] {board.submit_label}", style="bold green" if not state.is_editing else "bold blue")
    if state.is_editing:
        text.append("   [c] Cancel Edit", style="dim")
    return Panel(text, title=board.form_heading, border_style="cyan")


def render_posts(board: PostBoard) -> Table:
    table = Table(title="Posts", expand=True)
    table.add_column("ID", justify="right", style="dim", no_wrap=True)
    table.add_column("Title", style="bold magenta")
    table.add_column("Body")
    for post in board.state.posts:
        marker = " *" if post.id == board.state.editing_id else ""
        table.add_row(f"{post.id}{marker}", Text(post.title), Text(post.body))
    return table


def render(console: Console, board: PostBoard) -> None:
    console.print(render_form(board))
    console.print(render_posts(board))
    console.print(HELP_TEXT)


def _parse_id(arg: str) -> int | None:
    arg = arg.strip()
    return int(arg) if arg.isascii() and arg.isdigit() else None


async def handle_command(board: PostBoard, line: str, *, console: Console, ask: Ask) -> bool:
    """
    Apply one command line to the board. Returns False when the loop should stop.
    """
    command, _, arg = line.strip().partition(" ")
    command = command.lower()

    if command in {"q", "quit", "exit"}:
        return False
    if command in {"t", "title"}:
        board.set_title(ask("Post title"))
    elif command in {"b", "body"}:
        board.set_body(ask("Post description"))
    elif command in {"s", "submit"}:
        await board.submit()
    elif command in {"c", "cancel"}:
        board.cancel_edit()
    elif command in {"r", "refresh"}:
        await board.refresh()
    elif command in {"e", "edit", "d", "delete"}:
        post_id = _parse_id(arg)
        post = board.find(post_id) if post_id is not None else None
        if post is None:
            console.print(f"[red]No listed post with id {arg.strip() or '?'}[/red]")
        elif command in {"e", "edit"}:
            board.edit(post)
        else:
            await board.delete(post.id)
    elif command:
        console.print(HELP_TEXT)
    return True


async def run(board: PostBoard, *, console: Console, ask: Ask | None = None) -> None:
    ask = ask or (lambda label: Prompt.ask(label, console=console))

    # First pass loads the list, later passes apply one command each.
    line = "r"
    while True:
        try:
            keep_going = await handle_command(board, line, console=console, ask=ask)
        except PostsApiError as exc:
            logger.debug("posts_api_error status=%s message=%s", exc.status_code, exc.message)
            console.print(f"[red]Request failed ({exc.status_code}): {exc.message}[/red]")
            keep_going = True
        except httpx.HTTPError as exc:
            console.print(f"[red]Request failed: {exc}[/red]")
            keep_going = True
        if not keep_going:
            return None
        render(console, board)
        line = ask(">")


def build_board(api: PostsApi, console: Console) -> PostBoard:
    return PostBoard(
        api,
        confirm=lambda message: Confirm.ask(message, console=console),
        alert=lambda message: console.print(Panel(message, border_style="red")),
    )
