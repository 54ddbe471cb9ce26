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

from dataclasses import dataclass, field
from typing import Optional

from .domain.errors import ConfigurationError
from .domain.models import SortOrder
from .services.sizer_service import default_workers, normalise_root


@dataclass(frozen=True)
class RunConfig:
    """Everything one run needs; built once by the CLI and passed down explicitly."""
    root: str
    sort: SortOrder = SortOrder.ASC
    workers: int = field(default_factory=default_workers)
    include_hidden: bool = False

    @classmethod
    def from_options(
        cls,
        root: Optional[str] = "",
        sort: str = "asc",
        workers: Optional[int] = None,
        include_hidden: bool = False,
    ) -> "RunConfig":
        """
        Validate raw option values.

        Raises:
            ConfigurationError: unknown sort order or a worker count below 1.
        """
        try:
            order = SortOrder(sort)
        except ValueError:
            raise ConfigurationError(
                f"invalid sort order {sort!r}; use asc or desc for --sort"
            ) from None

        if workers is None:
            workers = default_workers()
        if int(workers) < 1:
            raise ConfigurationError(f"--workers must be an integer >= 1, got {workers}")

        return cls(
            root=normalise_root(root),
            sort=order,
            workers=int(workers),
            include_hidden=bool(include_hidden),
        )
