# Author: Michael Welter <me@mikinho.com>
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# THE SOFTWARE.

import logging
import os
from contextlib import ExitStack

from .discovery import discover
from .populate import populate
from .render import format_header
from .schema import MAX_COLUMNS

logger = logging.getLogger(__name__)


def convert(root, output_dir, base_name, *, max_columns=MAX_COLUMNS, profile=False):
    """
    Infer tables from a parsed JSON value and write one CSV file per table
    into output_dir, which is created if missing.

    Returns the registry of inferred tables. OSError from creating the
    directory or opening a file propagates; files already written are left
    in place.
    """
    registry = discover(root, base_name, max_columns=max_columns)
    os.makedirs(output_dir, exist_ok=True)
    if not registry:
        logger.info("No tables generated for this JSON")
        return registry

    with ExitStack() as stack:
        for table in registry:
            path = os.path.join(output_dir, f"{table.name}.csv")
            table.file = stack.enter_context(open(path, "w", encoding="utf-8", newline=""))
            table.file.write(format_header(table.columns) + "\n")
        try:
            populate(root, registry, profile=profile)
        finally:
            for table in registry:
                table.file = None
    for table in registry:
        logger.debug("Wrote %d rows to %s.csv", table.row_count, table.name)
    return registry
