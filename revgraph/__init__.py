"""History graph lanes, ref handling, filtering and command building for git history viewers."""

__version__ = "0.1.0"

__all__ = [
    "args",
    "dragdrop",
    "extcmds",
    "filters",
    "gitcmds",
    "glyphs",
    "lanes",
    "navigation",
    "refops",
    "refs",
    "session",
]