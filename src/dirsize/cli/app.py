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

from typing import Optional
import logging

import typer

from ..adapters.filesystem.local_fs import LocalFS
from ..config import RunConfig
from ..domain.errors import ConfigurationError, TraversalError
from ..services import DirectorySizer, ListingService, ReportService

from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(help="dirsize CLI - list a directory's entries sorted by total size")

logger = logging.getLogger(__name__)


def _wire(config: RunConfig) -> ReportService:
    """
    Minimal composition root:
      LocalFS + ListingService + DirectorySizer -> ReportService
    """
    fs = LocalFS()
    lister = ListingService(fs, include_hidden=config.include_hidden)
    sizer = DirectorySizer(fs, workers=config.workers)
    return ReportService(lister, sizer)


@app.command()
def main(
    ctx: typer.Context,
    root: str = typer.Option(
        "",
        "--root",
        help="Root directory to list. Empty means the current working directory.",
    ),
    sort: str = typer.Option(
        "asc",
        "--sort",
        help="Sort order by size: asc or desc.",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        help="Size of the directory-scanning thread pool. Defaults to min(32, CPUs + 4).",
    ),
    include_hidden: bool = typer.Option(
        False,
        "--all",
        help="Also list entries whose names start with '.'.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    List the entries of ROOT with their sizes (directories summed recursively).
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    # Validate before touching the filesystem; bad flags print usage and exit 1.
    try:
        config = RunConfig.from_options(
            root=root, sort=sort, workers=workers, include_hidden=include_hidden
        )
    except ConfigurationError as e:
        typer.echo(f"Error: {e}")
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    report = _wire(config)
    try:
        entries = report.build(config)
    except TraversalError as e:
        typer.echo(f"Error walking the filesystem: {e}", err=True)
        raise typer.Exit(code=1)

    for line in report.render(entries):
        typer.echo(line)


if __name__ == "__main__":
    app()
