# Author: Michael Welter <me@mikinho.com>
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# THE SOFTWARE.

"""
Second pass: walk the JSON tree again and write one CSV row per object and
per scalar array element into the table discovery assigned to it.
"""

import logging

from .discovery import format_path
from .profiling import ColumnProfile
from .render import format_row, render_scalar
from .schema import TableKind, is_scalar

logger = logging.getLogger(__name__)


def populate(root, registry, profile=False):
    _populate_node(root, registry, (), None, profile)


def _populate_node(node, registry, path, parent_pk, profile):
    if isinstance(node, dict):
        _populate_object(node, registry, path, parent_pk, profile)
    elif isinstance(node, list):
        _populate_array(node, registry, path, parent_pk, profile)


def _populate_object(obj, registry, path, parent_pk, profile):
    table = registry.table_at(path)
    if table is None:
        logger.warning("No table resolved for object at %s; row skipped", format_path(path))
        for key, value in obj.items():
            _populate_node(value, registry, path + (key,), parent_pk, profile)
        return

    pk = table.allocate_key()
    fields = [str(pk)]
    for column in table.columns[1:]:
        if table.parent_fk_column and column == table.parent_fk_column:
            fields.append("" if parent_pk is None else str(parent_pk))
            continue
        value = obj.get(column)
        if not is_scalar(value):
            value = None
        if profile:
            _observe(table, column, value)
        fields.append(render_scalar(value))
    _write_row(table, fields)

    for key, value in obj.items():
        if isinstance(value, (dict, list)):
            _populate_node(value, registry, path + (key,), pk, profile)


def _populate_array(arr, registry, path, parent_pk, profile):
    if not arr or isinstance(arr[0], list):
        return
    table = registry.table_at(path)
    if table is None:
        logger.warning("No table resolved for array at %s; rows skipped", format_path(path))
        for i, element in enumerate(arr):
            _populate_node(element, registry, path + (i,), parent_pk, profile)
        return

    if table.kind is TableKind.ARRAY_OF_OBJECTS:
        for i, element in enumerate(arr):
            if not isinstance(element, dict):
                logger.warning(
                    "Skipping non-object element at %s in table %s", format_path(path + (i,)), table.name
                )
                continue
            _populate_object(element, registry, path + (i,), parent_pk, profile)
        return

    fk = "" if parent_pk is None else str(parent_pk)
    for idx, element in enumerate(arr):
        if not is_scalar(element):
            logger.warning(
                "Skipping non-scalar element at %s in table %s", format_path(path + (idx,)), table.name
            )
            continue
        pk = table.allocate_key()
        if profile:
            _observe(table, "value", element)
        _write_row(table, [str(pk), fk, str(idx), render_scalar(element)])


def _observe(table, column, value):
    prof = table.profiles.get(column)
    if prof is None:
        prof = table.profiles[column] = ColumnProfile()
    prof.observe(value)


def _write_row(table, fields):
    table.file.write(format_row(fields) + "\n")
    table.row_count += 1
