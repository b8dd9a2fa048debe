"""Keyboard text selection over a tagged text buffer."""

from __future__ import annotations

from typing import Optional

from textsel.buffer import CursorModel, SelectFunc, TextDocument
from textsel.render import HighlightCompositor, Palette
from textsel.runtime import telemetry
from textsel.runtime.config import TextSelConfig
from textsel.runtime.diagnostics import DiagnosticSink, NullSink

from .surface import DisplaySurface, MemorySurface


class TextSel:
    """Cursor + selection widget that paints through a :class:`DisplaySurface`.

    Every mutating call recomposes the tagged output before it returns and
    returns ``self`` so calls can be chained::

        view = TextSel(surface).set_text("Hello, World!")
        view.start_selection().move_right().move_right()
        view.get_selected_text()  # "Hel"
    """

    def __init__(
        self,
        surface: Optional[DisplaySurface] = None,
        *,
        config: Optional[TextSelConfig] = None,
        palette: Optional[Palette] = None,
        diagnostics: Optional[DiagnosticSink] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.config = config or TextSelConfig()
        self.palette = palette or Palette.from_config(self.config)
        self.surface: DisplaySurface = surface or MemorySurface()
        self.model = CursorModel()
        self.compositor = HighlightCompositor(
            self.palette, cursor_end_restore=self.config.cursor_end_restore
        )
        self.diagnostics: DiagnosticSink = diagnostics or NullSink()
        self.rendered = ""
        self._select_func: Optional[SelectFunc] = None
        self._logger_name = logger_name
        self.refresh()

    # -- buffer -----------------------------------------------------------

    def set_text(self, text: str) -> "TextSel":
        """Replace the buffer; the cursor and selection start over at (0, 0)."""

        self.model.replace_document(TextDocument(text))
        telemetry.record_event(
            "textsel.set_text",
            level="debug",
            data={"length": len(text), "last_row": self.model.document.last_row},
            logger_name=self._logger_name,
        )
        return self.refresh()

    def get_text(self, strip_tags: bool = False) -> str:
        document = self.model.document
        return document.plain_text() if strip_tags else document.raw

    def get_current_line(self) -> str:
        return self.model.current_line()

    # -- cursor -----------------------------------------------------------

    def get_cursor_position(self) -> tuple[int, int]:
        return self.model.cursor

    def set_cursor_position(self, row: int, col: int) -> "TextSel":
        self.model.set_cursor_position(row, col)
        return self.refresh()

    def reset_cursor(self) -> "TextSel":
        self.model.reset_cursor()
        return self.refresh()

    def move_up(self) -> "TextSel":
        self.model.move_up()
        return self.refresh()

    def move_down(self) -> "TextSel":
        self.model.move_down()
        return self.refresh()

    def move_left(self) -> "TextSel":
        self.model.move_left()
        return self.refresh()

    def move_right(self) -> "TextSel":
        self.model.move_right()
        return self.refresh()

    def move_to_start_of_line(self) -> "TextSel":
        self.model.move_to_start_of_line()
        return self.refresh()

    def move_to_end_of_line(self) -> "TextSel":
        self.model.move_to_end_of_line()
        return self.refresh()

    def move_to_first_line(self) -> "TextSel":
        self.model.move_to_first_line()
        return self.refresh()

    def move_to_last_line(self) -> "TextSel":
        self.model.move_to_last_line()
        return self.refresh()

    # -- selection --------------------------------------------------------

    @property
    def is_selecting(self) -> bool:
        return self.model.is_selecting

    def set_select_func(self, func: Optional[SelectFunc]) -> "TextSel":
        self._select_func = func
        return self

    def start_selection(self) -> "TextSel":
        self.model.start_selection()
        return self.refresh()

    def toggle_selection(self) -> "TextSel":
        if self.model.is_selecting:
            return self.reset_selection()
        return self.start_selection()

    def finish_selection(self) -> "TextSel":
        text = self.model.finish_selection(self._select_func)
        telemetry.record_event(
            "textsel.select",
            level="debug",
            data={"length": len(text), "notified": self._select_func is not None},
            logger_name=self._logger_name,
        )
        return self.refresh()

    def reset_selection(self) -> "TextSel":
        self.model.reset_selection()
        return self.refresh()

    def get_selection_range(self) -> tuple[int, int, int, int]:
        (start_row, start_col), (end_row, end_col) = self.model.selection_range()
        return start_row, start_col, end_row, end_col

    def get_selected_text(self) -> str:
        return self.model.selected_text()

    # -- rendering --------------------------------------------------------

    def refresh(self) -> "TextSel":
        """Recompose the overlays and push the result to the surface.

        Safe to call at any time, including from host focus callbacks.
        """

        show_cursor = self.config.show_cursor_unfocused or self.surface.has_focus()
        with telemetry.span(
            "textsel::compose",
            logger_name=self._logger_name,
            component="compositor",
            metadata={"cursor": self.model.cursor, "selecting": self.is_selecting},
        ):
            self.rendered = self.compositor.render(self.model, show_cursor=show_cursor)
        self.surface.set_text(self.rendered)
        return self

    # -- diagnostics ------------------------------------------------------

    def debug_colors(self) -> "TextSel":
        self.diagnostics("textsel.colors", self.palette.describe())
        return self

    def debug_cursor(self) -> "TextSel":
        row, col = self.model.cursor
        self.diagnostics("textsel.cursor", {"row": row, "col": col})
        return self

    def debug_selection(self) -> "TextSel":
        if self.model.is_selecting:
            start_row, start_col, end_row, end_col = self.get_selection_range()
            self.diagnostics(
                "textsel.selection",
                {
                    "start": (start_row, start_col),
                    "end": (end_row, end_col),
                },
            )
        else:
            self.diagnostics("textsel.selection", {"active": False})
        return self


__all__ = ["TextSel"]
