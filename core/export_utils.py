# core/export_utils.py
from __future__ import annotations
import logging
import os
import subprocess
from pathlib import Path
from typing import Iterable, List, Protocol, Sequence

import pandas as pd

from core.errors import ExportError

logger = logging.getLogger(__name__)

COLUMNS = ["#", "password", "length", "score", "strength", "suggestions"]


class ClipboardWriter(Protocol):
    def copy(self, text: str) -> None:
        ...


class CommandClipboard:
    """Copy text by piping it to a clipboard command (pbcopy, clip, xclip, xsel, wl-copy)."""

    def __init__(self, cmd: Sequence[str], timeout: int = 5):
        if not cmd:
            raise ValueError("clipboard command is empty")
        self.cmd = list(cmd)
        self.timeout = timeout

    def copy(self, text: str) -> None:
        try:
            subprocess.run(self.cmd, input=text, text=True, check=True, timeout=self.timeout,
                           capture_output=True)
        except (OSError, subprocess.SubprocessError) as e:
            raise ExportError(f"Clipboard command {self.cmd[0]!r} failed: {e}") from e
        logger.debug("Copied %d characters via %s", len(text), self.cmd[0])


def results_to_dataframe(results: Iterable) -> pd.DataFrame:
    """One row per GeneratedPassword; suggestions joined with '; '."""
    rows: List[dict] = []
    for i, (pw, assessment) in enumerate(results, 1):
        rows.append({
            "#": i,
            "password": pw,
            "length": len(pw),
            "score": assessment.score,
            "strength": assessment.label,
            "suggestions": "; ".join(assessment.suggestions),
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def to_csv_bytes(results: Iterable) -> bytes:
    return results_to_dataframe(results).to_csv(index=False).encode("utf-8")


def export_csv(results: Iterable, path: str | os.PathLike) -> Path:
    out = Path(path).expanduser()
    df = results_to_dataframe(results)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out, index=False, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Cannot write CSV to {out}: {e}") from e
    logger.info("Exported %d password(s) to %s", len(df), out)
    return out
