"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Display
    use_color: bool = True

    # Logging (curses owns the terminal, so logs only ever go to a file)
    log_file: str | None = None
    log_level: str = "WARNING"
