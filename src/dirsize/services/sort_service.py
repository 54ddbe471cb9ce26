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

from typing import List, Union

from ..domain.models import Entry, SortOrder


def sort_entries(entries: List[Entry], order: Union[SortOrder, str] = SortOrder.ASC) -> List[Entry]:
    """
    Sort `entries` in place by size and return the same list.

    Ties keep no particular order. Raises ValueError for an unknown order.
    """
    order = SortOrder(order)
    entries.sort(key=lambda e: e.size, reverse=order is SortOrder.DESC)
    return entries
