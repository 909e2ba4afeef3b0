"""
Logging for the Smart Home Hub API.

``run.py`` and ``create_app`` both call ``setup_logging`` with the
``LOG_LEVEL`` and ``LOG_FILE`` settings.  Handlers installed here carry
a ``home_hub.`` name, so later calls (another ``create_app`` in the same
process) only adjust the level and never double the output.  Handlers
owned by someone else, such as pytest's capture handler, are left in
place next to ours.
"""

import logging
from pathlib import Path
from typing import List, Optional

HANDLER_PREFIX = "home_hub."
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _owned_handlers(root: logging.Logger) -> List[logging.Handler]:
    return [h for h in root.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    console = logging.StreamHandler()
    console.set_name(HANDLER_PREFIX + "console")
    handlers: List[logging.Handler] = [console]
    if logfile:
        path = Path(logfile).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        handlers.append(file_handler)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send records from every module to the console and ``logfile``.

    ``level`` is a level name in any case; unknown names mean ``INFO``.
    The missing parent directories of ``logfile`` are created.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _owned_handlers(root):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
