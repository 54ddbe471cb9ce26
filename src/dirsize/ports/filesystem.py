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

from abc import ABC, abstractmethod
from typing import List


class FilesystemPort(ABC):
    """Abstract interface for filesystem access."""

    @abstractmethod
    def list_dir(self, path: str) -> List[str]:
        """Return the names of the immediate children of `path`. Raises OSError."""
        raise NotImplementedError

    @abstractmethod
    def stat(self, path: str, follow_symlinks: bool = True) -> dict:
        """Return metadata (path, size, is_dir, is_file) for a given path. Raises OSError."""
        raise NotImplementedError
