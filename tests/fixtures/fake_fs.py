# tests/fixtures/fake_fs.py
import os
import threading
import time
from pathlib import Path
from typing import Iterable, List, Optional

from dirsize.adapters.filesystem.local_fs import LocalFS


class FlakyFS(LocalFS):
    """
    Real local filesystem that raises OSError for selected paths.

    - fail_list: paths whose listing fails (unreadable directory)
    - fail_stat: paths whose stat fails (e.g. vanished file)
    Also records every path listed/stat'd so tests can count visits.
    """

    def __init__(
        self,
        fail_list: Optional[Iterable[Path]] = None,
        fail_stat: Optional[Iterable[Path]] = None,
    ) -> None:
        self.fail_list = {os.path.abspath(p) for p in (fail_list or ())}
        self.fail_stat = {os.path.abspath(p) for p in (fail_stat or ())}
        self.listed: List[str] = []
        self.stated: List[str] = []

    def list_dir(self, path: str) -> List[str]:
        self.listed.append(path)
        if path in self.fail_list:
            raise PermissionError(13, "Permission denied", path)
        return super().list_dir(path)

    def stat(self, path: str, follow_symlinks: bool = True) -> dict:
        self.stated.append(path)
        if path in self.fail_stat:
            raise OSError(2, "No such file or directory", path)
        return super().stat(path, follow_symlinks=follow_symlinks)


def write_file(p: Path, size: int) -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(b"x" * size)
    return p


class SlowFS(LocalFS):
    """
    Local filesystem whose listings take a little while, tracking how many
    list_dir calls are running at the same moment.
    """

    def __init__(self, delay: float = 0.01) -> None:
        self.delay = delay
        self.active = 0
        self.peak = 0
        self._lock = threading.Lock()

    def list_dir(self, path: str) -> List[str]:
        with self._lock:
            self.active += 1
            self.peak = max(self.peak, self.active)
        try:
            time.sleep(self.delay)
            return super().list_dir(path)
        finally:
            with self._lock:
                self.active -= 1
