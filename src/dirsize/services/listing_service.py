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

import logging
import os
from typing import List, Optional

from ..domain.errors import TraversalError
from ..domain.models import Entry, EntryType
from ..ports.filesystem import FilesystemPort
from .sizer_service import normalise_root

logger = logging.getLogger(__name__)


class ListingService:
    """
    Lists the immediate children of a root directory (no recursion).

    Files carry their own size; directories are listed with size 0 and get
    their total from DirectorySizer. Types follow symlinks, like a shell glob.
    """

    def __init__(self, fs: FilesystemPort, *, include_hidden: bool = False) -> None:
        self._fs = fs
        self._include_hidden = bool(include_hidden)

    def list_entries(self, root: Optional[str]) -> List[Entry]:
        root_path = normalise_root(root)
        try:
            names = self._fs.list_dir(root_path)
        except OSError as e:
            raise TraversalError(root_path, str(e)) from e

        entries: List[Entry] = []
        for name in names:
            if not self._include_hidden and name.startswith("."):
                continue

            path = os.path.join(root_path, name)
            try:
                meta = self._fs.stat(path)
            except OSError as e:
                logger.warning("ListingService: stat failed for %s: %s", path, e)
                continue

            if meta.get("is_dir"):
                entries.append(Entry(name, EntryType.DIRECTORY, 0, path))
            else:
                entries.append(
                    Entry(name, EntryType.FILE, int(meta.get("size") or 0), path)
                )
        return entries
