# core/logging_utils.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_HANDLER_TAG = "_vlabs_handler"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger once: console handler plus optional file handler.
    Calling again only updates the level (Streamlit re-runs the script on every interaction).
    """
    root = logging.getLogger()
    lvl = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(lvl, int):
        lvl = logging.INFO
    root.setLevel(lvl)

    if any(getattr(h, _HANDLER_TAG, False) for h in root.handlers):
        return

    fmt = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(fmt)
    setattr(console, _HANDLER_TAG, True)
    root.addHandler(console)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(fmt)
        setattr(fh, _HANDLER_TAG, True)
        root.addHandler(fh)

    logging.getLogger(__name__).debug("Logging initialised (level=%s, file=%s)", level, log_file)
