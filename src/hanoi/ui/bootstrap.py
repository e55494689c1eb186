"""Terminal application bootstrap helpers."""

from __future__ import annotations

import logging

from hanoi.game.engine import GameEngine
from hanoi.ui.input_source import KeyboardInput
from hanoi.ui.renderer import CursesRenderer
from hanoi.ui.session import TerminalSession
from hanoi.ui.settings import AppSettings
from hanoi.ui.shell import GameShell
from hanoi.ui.theme import SceneTheme

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Send logs to the configured file, or nowhere while curses owns the screen."""
    package_logger = logging.getLogger("hanoi")
    if settings.log_file is None:
        package_logger.addHandler(logging.NullHandler())
        package_logger.propagate = False
        return

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level!r}")
    logging.basicConfig(filename=settings.log_file, level=level, format=_LOG_FORMAT)


def run_application(settings: AppSettings | None = None) -> int:
    """Set up the terminal, play one game, and restore the terminal."""
    settings = settings or AppSettings()
    configure_logging(settings)

    engine = GameEngine()
    engine.initialize()

    with TerminalSession(use_color=settings.use_color) as session:
        theme = SceneTheme.color() if session.has_color else SceneTheme.plain()
        renderer = CursesRenderer(session.window, session.palette, theme)
        shell = GameShell(engine, renderer, KeyboardInput(session.window))
        shell.run()

    _LOGGER.info("Finished after %d moves", engine.move_count)
    return 0
