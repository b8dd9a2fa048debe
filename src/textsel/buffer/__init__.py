"""Tagged text storage, scanning and cursor/selection state."""

from .document import TextDocument
from .model import CursorModel, SelectFunc
from .scanner import Position, ScanCell, iter_cells, last_row, strip_tags
from .state import CursorState, SelectionState
from .styles import TAG_PATTERN, StyleState, match_tag

__all__ = [
    "TextDocument",
    "CursorModel",
    "SelectFunc",
    "Position",
    "ScanCell",
    "iter_cells",
    "last_row",
    "strip_tags",
    "CursorState",
    "SelectionState",
    "TAG_PATTERN",
    "StyleState",
    "match_tag",
]
