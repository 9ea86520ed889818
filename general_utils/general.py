from __future__ import annotations

import asyncio
import json
import logging
import math
import os
import time
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

MAX_SAFE_INTEGER = 2**53 - 1
MAX_INDENT = 10

_NON_FINITE_KEYS = {"nan": "NaN", "inf": "Infinity", "-inf": "-Infinity"}


def _normalize_key(key: Any) -> Any:
    if isinstance(key, float) and not math.isfinite(key):
        return _NON_FINITE_KEYS[repr(key)]
    return key


def _normalize(value: Any, path: set[int]) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value) if abs(value) > MAX_SAFE_INTEGER else value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (dict, list, tuple)):
        marker = id(value)
        if marker in path:
            raise ValueError("Circular reference detected")
        path.add(marker)
        try:
            if isinstance(value, dict):
                return {_normalize_key(key): _normalize(item, path) for key, item in value.items()}
            return [_normalize(item, path) for item in value]
        finally:
            path.discard(marker)
    return value


class GeneralUtils:
    @staticmethod
    def stringify(obj: Any, space: int = 2) -> str:
        """
        Serialize ``obj`` to JSON without ever raising.

        Integers beyond the safe range (2**53 - 1) become decimal strings and
        non-finite floats become ``null``. ``space`` <= 0 gives compact output,
        larger values are capped at 10.
        On failure (cycles, unsupported types) the error description is
        returned instead of JSON.
        """
        try:
            normalized = _normalize(obj, set())
            if space > 0:
                return json.dumps(normalized, indent=min(space, MAX_INDENT), ensure_ascii=False, allow_nan=False)
            return json.dumps(normalized, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except Exception as err:
            logger.debug("stringify failed: %s", err)
            return f"{type(err).__name__}: {err}"

    @staticmethod
    def read_json_file(file_path: PathLike) -> Any | None:
        """
        Read and parse a JSON file. Returns None if the file is missing,
        unreadable or not valid JSON.
        """
        path = Path(file_path)
        try:
            if not path.exists():
                return None
            content = path.read_text(encoding="utf-8")
            return json.loads(content)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as err:
            logger.warning("Failed to read JSON from %s: %s", path, err)
            return None

    @staticmethod
    def save_json_file(filename: PathLike, data: Any) -> None:
        """
        Write ``data`` as indented JSON, replacing the file. Filesystem errors
        propagate to the caller.
        """
        json_string = GeneralUtils.stringify(data, 2)
        Path(filename).write_text(json_string, encoding="utf-8")

    @staticmethod
    async def sleep(milliseconds: float) -> int | None:
        if milliseconds <= 0:
            return None
        deadline = time.monotonic() + milliseconds / 1000
        remaining = milliseconds / 1000
        # the loop clock may fire slightly ahead of the monotonic deadline
        while remaining > 0:
            await asyncio.sleep(remaining)
            remaining = deadline - time.monotonic()
        return 1


stringify = GeneralUtils.stringify
read_json_file = GeneralUtils.read_json_file
save_json_file = GeneralUtils.save_json_file
sleep = GeneralUtils.sleep
