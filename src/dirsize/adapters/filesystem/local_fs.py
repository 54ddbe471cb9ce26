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

import os
import stat as statmod
from typing import List

from ...ports.filesystem import FilesystemPort


class LocalFS(FilesystemPort):
    """Local filesystem adapter backed by os.listdir / os.stat."""

    def list_dir(self, path: str) -> List[str]:
        # Sorted so listings (and therefore logs and ties) are reproducible.
        return sorted(os.listdir(path))

    def stat(self, path: str, follow_symlinks: bool = True) -> dict:
        st = os.stat(path, follow_symlinks=follow_symlinks)
        return {
            "path": str(path),
            "size": st.st_size,
            "is_dir": statmod.S_ISDIR(st.st_mode),
            "is_file": statmod.S_ISREG(st.st_mode),
        }
