"""Remember the directories and prefixes of the last successful run."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from typing import Any

DEFAULT_PATH = "last_run.json"


@dataclass
class LastRun:
    """Directories and prefixes chosen for a merge."""

    src_dir: str = ""
    dst_dir: str = ""
    src_prefix: str = ""
    dst_prefix: str = ""


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def load_last_run(path: str | os.PathLike = DEFAULT_PATH) -> LastRun | None:
    """Read saved settings; None when the file cannot be opened."""
    try:
        with open(path, encoding="utf-8") as stream:
            text = stream.read()
    except OSError:
        return None
    try:
        data = json.loads(text)
    except ValueError:
        data = None
    if not isinstance(data, dict):
        data = {}
    return LastRun(
        src_dir=_as_text(data.get("src_dir")),
        dst_dir=_as_text(data.get("dst_dir")),
        src_prefix=_as_text(data.get("src_prefix")),
        dst_prefix=_as_text(data.get("dst_prefix")),
    )


def save_last_run(settings: LastRun, path: str | os.PathLike = DEFAULT_PATH) -> None:
    """Write ``settings`` to ``path`` as JSON."""
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(json.dumps(asdict(settings), indent=3, sort_keys=True, separators=(",", " : ")))
        stream.write("\n")