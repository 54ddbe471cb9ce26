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

from decimal import ROUND_HALF_UP, Decimal

KB = 1000
MB = 1000 * KB
GB = 1000 * MB

_TWO_PLACES = Decimal("0.01")


def _scaled(n: int, unit: int) -> Decimal:
    return (Decimal(n) / Decimal(unit)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def format_size(n: int) -> str:
    """
    Render a byte count with decimal (1000-based) units.

        999           -> "999 bytes"
        1000          -> "1.00 KB"
        1_500_000     -> "1.50 MB"
        1_000_000_000 -> "1.00 GB"
    """
    n = int(n)
    if n < 0:
        raise ValueError(f"size must be non-negative: {n}")
    if n >= GB:
        return f"{_scaled(n, GB)} GB"
    if n >= MB:
        return f"{_scaled(n, MB)} MB"
    if n >= KB:
        return f"{_scaled(n, KB)} KB"
    return f"{n} bytes"
