"""Exception hierarchy shared across layoutkit."""

from __future__ import annotations


class LayoutkitError(Exception):
    """Base class for every error raised by layoutkit."""
