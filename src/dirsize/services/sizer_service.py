# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import logging
import os
from collections import deque
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional

from ..domain.errors import TraversalError
from ..ports.filesystem import FilesystemPort

logger = logging.getLogger(__name__)


def default_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


def normalise_root(root: Optional[str]) -> str:
    """Absolute form of `root`; an empty root means the current working directory."""
    if not root:
        return os.getcwd()
    return os.path.abspath(os.fspath(root))


@dataclass
class _DirScan:
    """What one scan task learned about a single directory."""
    path: str
    own_bytes: int = 0
    subdirs: List[str] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)


@dataclass
class SizeResult:
    """
    Outcome of one traversal.

    sizes:  absolute directory path -> total bytes of regular files beneath it
    errors: path -> message for every node that could not be read; the
            directories above such a path are under-counted
    """
    sizes: Dict[str, int]
    errors: Dict[str, str]


class DirectorySizer:
    """
    Computes the aggregate byte size of every directory under a root.

    Directories are scanned one level at a time by a bounded thread pool:
      - each scan task lists one directory, lstat()s its children and returns
        the bytes of its own regular files plus the subdirectories it found
      - the calling thread is the single consumer of task results; it queues
        newly found subdirectories and records per-directory data
      - once every task has joined, totals are folded bottom-up so each file
        is stat'd exactly once

    Symlinks are never followed. No more than `max_in_flight` tasks are
    submitted at a time; the remaining directories wait in a queue.
    """

    def __init__(
        self,
        fs: FilesystemPort,
        *,
        workers: Optional[int] = None,
        max_in_flight: Optional[int] = None,
    ) -> None:
        self._fs = fs
        self._workers = default_workers() if workers is None else int(workers)
        if self._workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self._max_in_flight = (
            2 * self._workers if max_in_flight is None else int(max_in_flight)
        )
        if self._max_in_flight < 1:
            raise ValueError(f"max_in_flight must be >= 1, got {max_in_flight}")

    @property
    def workers(self) -> int:
        return self._workers

    @property
    def max_in_flight(self) -> int:
        return self._max_in_flight

    def sizes(self, root: Optional[str]) -> Dict[str, int]:
        """Return the directory size map for `root`. Raises TraversalError if root is unreadable."""
        return self.walk(root).sizes

    def walk(self, root: Optional[str]) -> SizeResult:
        root_path = normalise_root(root)

        own: Dict[str, int] = {}
        children: Dict[str, List[str]] = {}
        errors: Dict[str, str] = {}
        # Completion order: a parent always finishes before its children are queued.
        order: List[str] = []

        queued: Deque[str] = deque([root_path])
        with ThreadPoolExecutor(
            max_workers=self._workers, thread_name_prefix="dirsize"
        ) as pool:
            in_flight: Dict[Future, str] = {}
            while queued or in_flight:
                while queued and len(in_flight) < self._max_in_flight:
                    path = queued.popleft()
                    in_flight[pool.submit(self._scan_dir, path)] = path

                done, _ = wait(in_flight, return_when=FIRST_COMPLETED)
                for fut in done:
                    path = in_flight.pop(fut)
                    try:
                        scan = fut.result()
                    except OSError as e:
                        if path == root_path:
                            raise TraversalError(path, str(e)) from e
                        logger.warning("DirectorySizer: cannot list %s: %s", path, e)
                        errors[path] = str(e)
                        scan = _DirScan(path)

                    own[path] = scan.own_bytes
                    children[path] = scan.subdirs
                    errors.update(scan.errors)
                    order.append(path)
                    queued.extend(scan.subdirs)

        totals: Dict[str, int] = {}
        for path in reversed(order):
            totals[path] = own[path] + sum(totals[c] for c in children[path])

        if errors:
            logger.info(
                "DirectorySizer: %d path(s) under %s could not be read; totals may be incomplete",
                len(errors),
                root_path,
            )
        return SizeResult(sizes=totals, errors=errors)

    def _scan_dir(self, path: str) -> _DirScan:
        """Runs on a worker thread. Listing failures propagate; per-child failures are recorded."""
        logger.debug("DirectorySizer: scanning %s", path)
        scan = _DirScan(path)
        for name in self._fs.list_dir(path):
            child = os.path.join(path, name)
            try:
                meta = self._fs.stat(child, follow_symlinks=False)
            except OSError as e:
                logger.warning("DirectorySizer: stat failed for %s: %s", child, e)
                scan.errors[child] = str(e)
                continue

            if meta.get("is_dir"):
                scan.subdirs.append(child)
            elif meta.get("is_file"):
                scan.own_bytes += int(meta.get("size") or 0)
        return scan
