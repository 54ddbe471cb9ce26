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
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Iterable, Iterator, List

from ..domain.models import Entry
from ..formatting import format_size
from .listing_service import ListingService
from .sizer_service import DirectorySizer
from .sort_service import sort_entries

if TYPE_CHECKING:
    from ..config import RunConfig

logger = logging.getLogger(__name__)


class ReportService:
    """
    Builds the sized, sorted listing of a root directory.

    Notes:
      - The lister and the sizer run independently over the same root.
      - Directory sizes come from the sizer's map; a directory missing from
        the map (e.g. a symlink to a directory, which the sizer never follows)
        is reported as 0 bytes.
    """

    def __init__(self, lister: ListingService, sizer: DirectorySizer) -> None:
        self._lister = lister
        self._sizer = sizer

    def build(self, config: RunConfig) -> List[Entry]:
        """
        List, size and sort the entries of `config.root`.

        Raises:
            TraversalError: if the root cannot be listed or walked.
        """
        started = time.perf_counter()

        entries = self._lister.list_entries(config.root)
        result = self._sizer.walk(config.root)

        sized = [
            replace(e, size=result.sizes.get(e.path, 0)) if e.is_dir else e
            for e in entries
        ]
        sort_entries(sized, config.sort)

        logger.info(
            "Sized %d entries under %s with %d worker(s) in %.3fs",
            len(sized),
            config.root,
            self._sizer.workers,
            time.perf_counter() - started,
        )
        return sized

    @staticmethod
    def render(entries: Iterable[Entry]) -> Iterator[str]:
        for e in entries:
            yield f"Name: {e.name}, Type: {e.type.value}, Size: {format_size(e.size)}"
