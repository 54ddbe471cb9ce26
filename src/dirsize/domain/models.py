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

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Entry:
    """
    One immediate child of the listed root.

    `size` is the file's own size for files and the recursive total for
    directories (zero until the sizer's result has been merged in).
    `path` is the absolute path used as the key into the directory size map.
    """
    name: str
    type: EntryType
    size: int = 0
    path: str = ""

    @property
    def is_dir(self) -> bool:
        return self.type is EntryType.DIRECTORY
