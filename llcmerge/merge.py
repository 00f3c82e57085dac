"""Merge translation documents from a source tree into a target tree."""

from __future__ import annotations

import json
import os
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any

ProgressCallback = Callable[[int, int], None]


class MergeError(Exception):
    """Raised when the directories given to a merge are unusable."""


def count_files(directory: str | os.PathLike) -> int:
    """Count the regular files below ``directory``, recursively."""
    return sum(len(files) for _, _, files in os.walk(directory))


def target_name(file_name: str, src_prefix: str, dst_prefix: str) -> str:
    """Swap the source prefix of ``file_name`` for the target prefix."""
    if file_name.startswith(src_prefix):
        file_name = file_name[len(src_prefix):]
    return dst_prefix + file_name


def _id_key(value: Any) -> str:
    """Render an ``id`` value as a string key."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    raise TypeError(f"id value of type {type(value).__name__} has no string form")


def _data_list(document: Any) -> list | None:
    if isinstance(document, dict) and isinstance(document.get("dataList"), list):
        return document["dataList"]
    return None


def merge_data_lists(dst_document: Any, src_document: Any) -> dict | None:
    """Return a copy of ``dst_document`` with the source entries it lacks.

    Entries are matched on their ``id``; entries without one are ignored.
    Returns None when either document has no ``dataList`` array.
    """
    dst_list = _data_list(dst_document)
    src_list = _data_list(src_document)
    if dst_list is None or src_list is None:
        return None
    known = {
        _id_key(item["id"])
        for item in dst_list
        if isinstance(item, dict) and "id" in item
    }
    merged = list(dst_list)
    merged.extend(
        item
        for item in src_list
        if isinstance(item, dict) and "id" in item and _id_key(item["id"]) not in known
    )
    result = dict(dst_document)
    result["dataList"] = merged
    return result


def _read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as stream:
            return json.load(stream)
    except (OSError, ValueError):
        return None


def _write_json(path: Path, document: Any) -> None:
    with path.open("w", encoding="utf-8") as stream:
        json.dump(document, stream, indent=3, separators=(",", " : "), ensure_ascii=False)


def merge_directories(
    dst_dir: str | os.PathLike,
    dst_prefix: str,
    src_dir: str | os.PathLike,
    src_prefix: str,
    on_progress: ProgressCallback | None = None,
) -> int:
    """Merge every source file into the target tree.

    Files missing from the target are copied; existing ones get the source
    entries they lack. ``on_progress(total, done)`` is called after each
    source file. Returns the number of files copied.
    """
    if not str(dst_dir):
        raise MergeError("目标目录不能为空")
    if not str(src_dir):
        raise MergeError("源目录不能为空")
    dst_root = Path(dst_dir).absolute()
    src_root = Path(src_dir).absolute()
    if not dst_root.is_dir():
        raise MergeError(f"路径：{dst_dir}不存在")
    if not src_root.is_dir():
        raise MergeError(f"路径：{src_dir}不存在")

    sources = sorted(p for p in src_root.rglob("*") if p.is_file())
    total = count_files(src_root)
    copied = 0
    for done, src_path in enumerate(sources, start=1):
        try:
            relative_dir = src_path.parent.relative_to(src_root)
            dst_path = dst_root / relative_dir / target_name(src_path.name, src_prefix, dst_prefix)
            if not dst_path.exists():
                dst_path.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(src_path, dst_path)
                copied += 1
                continue
            dst_document = _read_json(dst_path)
            if _data_list(dst_document) is None:
                continue
            merged = merge_data_lists(dst_document, _read_json(src_path))
            if merged is not None:
                _write_json(dst_path, merged)
        finally:
            if on_progress is not None:
                on_progress(total, done)
    return copied