"""Executable Textual app: pick a run of text with the keyboard and print it."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import on
    from textual.app import App, ComposeResult
    from textual.containers import VerticalScroll
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textsel.adapters.textual.app"
    ) from exc

from textsel.render.compositor import CURSOR_END_RESTORE_CHOICES
from textsel.runtime.config import TextSelConfig

from .view import TextSelView

SAMPLE_TEXT = """
This is an example of the [yellow]textsel[-] package.

Use the [green::b]arrow keys[-] (or h/j/k/l) to move the cursor.

Press space to start/stop selecting text and enter to print it.
"""


class TextSelApp(App[str]):
    """Demo host: exits with the selected text as its return value."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#text-area {
		height: 1fr;
		border: round $accent;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, text: str = SAMPLE_TEXT, *, config: TextSelConfig | None = None) -> None:
        super().__init__()
        self._text = text
        self._config = config or TextSelConfig.from_env()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with VerticalScroll(id="text-area"):
            yield TextSelView(self._text, config=self._config, id="text-view")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#text-view", TextSelView).focus()

    @on(TextSelView.StatusChanged)
    def _show_status(self, message: TextSelView.StatusChanged) -> None:
        self.query_one("#status-line", Static).update(message.status)

    @on(TextSelView.Selected)
    def _finish(self, message: TextSelView.Selected) -> None:
        self.exit(message.text)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Select text with the keyboard.")
    parser.add_argument(
        "--file",
        type=Path,
        default=os.environ.get("TEXTSEL_FILE"),
        help="Tagged text file to display (default: built-in sample)",
    )
    parser.add_argument(
        "--cursor-end-restore",
        choices=CURSOR_END_RESTORE_CHOICES,
        default=None,
        help="Style restored after a cursor sitting on the selection end",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    config = TextSelConfig.from_env()
    if args.cursor_end_restore:
        config = config.with_overrides(cursor_end_restore=args.cursor_end_restore)
    text = Path(args.file).read_text(encoding="utf-8") if args.file else SAMPLE_TEXT
    selected = TextSelApp(text, config=config).run()
    if selected is not None:
        sys.stdout.write(f"Selected text:\n\n{selected}\n")


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
