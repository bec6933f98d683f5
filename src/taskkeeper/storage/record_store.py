# src/taskkeeper/storage/record_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Generic, TypeVar

from ..tasks.task_models import Task, User
from .codec import RecordParseError, decode_task, decode_user, encode_task, encode_user

logger = logging.getLogger(__name__)

R = TypeVar("R")


class RecordStore(Generic[R]):
    """
    Flat-file store for one record type.

    - one encoded record per line, file order is collection order
    - a missing file is an empty collection
    - save_all rewrites the whole file (temp file + os.replace)

    There is no locking; the file is owned by this instance alone.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        encode: Callable[[R], str],
        decode: Callable[[str], R],
    ) -> None:
        self._path = Path(path)
        self._encode = encode
        self._decode = decode

    def _read_lines(self) -> list[str]:
        data = self._path.read_bytes()
        try:
            # utf-8-sig drops a leading BOM left by editors such as Notepad.
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            lineno = data[: e.start].count(b"\n") + 1
            bad = data.split(b"\n")[lineno - 1].decode("utf-8", errors="replace")
            raise RecordParseError(
                f"{self._path}:{lineno}: not valid UTF-8 ({e.reason})", line=bad
            ) from e

        lines = text.split("\n")
        # The final "\n" terminates the last record; one extra empty line at EOF is tolerated.
        for _ in range(2):
            if lines and not lines[-1].strip("\r"):
                lines.pop()
        return lines

    def load_all(self) -> list[R]:
        if not self._path.exists():
            logger.debug("load_all path=%s missing, empty collection", self._path)
            return []

        records: list[R] = []
        for lineno, line in enumerate(self._read_lines(), start=1):
            try:
                records.append(self._decode(line))
            except RecordParseError as e:
                raise RecordParseError(f"{self._path}:{lineno}: {e}", line=e.line) from e

        logger.debug("load_all path=%s records=%d", self._path, len(records))
        return records

    def save_all(self, records: Sequence[R]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        with tmp.open("w", encoding="utf-8", newline="") as f:
            for record in records:
                f.write(self._encode(record))
                f.write("\n")
        os.replace(tmp, self._path)
        logger.debug("save_all path=%s records=%d", self._path, len(records))


def user_store(path: str | Path) -> RecordStore[User]:
    return RecordStore(path, encode=encode_user, decode=decode_user)


def task_store(path: str | Path) -> RecordStore[Task]:
    return RecordStore(path, encode=encode_task, decode=decode_task)
