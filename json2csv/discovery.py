# Author: Michael Welter <me@mikinho.com>
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# THE SOFTWARE.

"""
First pass: walk the JSON tree and infer the tables.

Objects become tables (objects with the same scalar key set share one),
arrays of objects become child tables and arrays of scalars become
junction tables with (parent_id, idx, value) rows. Every node that owns a
table is annotated in the registry by its path so the population pass can
look it up instead of re-deriving it.
"""

import logging

from .schema import MAX_COLUMNS, Registry, TableKind, is_scalar, shape_signature

logger = logging.getLogger(__name__)

DEFAULT_ARRAY_KEY = "items"


def discover(root, base_name, max_columns=MAX_COLUMNS):
    registry = Registry(base_name, max_columns=max_columns)
    _discover_node(root, registry, (), hint=None, parent=None, element_of=None, warned=set())
    return registry


def _discover_node(node, registry, path, hint, parent, element_of, warned):
    if isinstance(node, dict):
        _discover_object(node, registry, path, hint, parent, element_of, warned)
    elif isinstance(node, list):
        _discover_array(node, registry, path, hint, parent, warned)


def _discover_object(obj, registry, path, hint, parent, element_of, warned):
    if element_of is not None:
        # all elements of one array share the table built from the first one
        table = element_of
        for key, value in obj.items():
            if not is_scalar(value) or key in table.columns or key in table.dropped_columns:
                continue
            if (table.name, key) not in warned:
                warned.add((table.name, key))
                logger.warning(
                    "Table %s has no column for key %r seen in a later array element; values dropped",
                    table.name, key,
                )
    else:
        signature = shape_signature(obj)
        table = registry.find_object_table(signature)
        if table is None:
            table = registry.create(
                hint if hint is not None else registry.base_name,
                TableKind.OBJECT,
                signature=signature,
                parent=parent,
            )
            if parent is not None:
                table.set_foreign_key(f"{parent.name}_id")
            for key, value in obj.items():
                if is_scalar(value):
                    table.add_column(key)
    _warn_shadowed_keys(obj, table, warned)
    registry.annotate(path, table)

    for key, value in obj.items():
        if isinstance(value, (dict, list)):
            _discover_node(value, registry, path + (key,), hint=key, parent=table, element_of=None, warned=warned)


def _warn_shadowed_keys(obj, table, warned):
    # the synthetic id and foreign key columns take precedence over members of the same name
    for key, value in obj.items():
        shadowed = key == "id" or (table.parent_fk_column and key == table.parent_fk_column)
        if not is_scalar(value) or not shadowed:
            continue
        if (table.name, key) not in warned:
            warned.add((table.name, key))
            logger.warning(
                "Member %r of table %s collides with its %s column; values dropped",
                key, table.name, "primary key" if key == "id" else "foreign key",
            )


def _discover_array(arr, registry, path, hint, parent, warned):
    if not arr:
        return
    first = arr[0]
    key = hint if hint is not None else DEFAULT_ARRAY_KEY
    prefix = parent.name if parent is not None else registry.base_name
    parent_name = parent.name if parent is not None else None
    name_hint = f"{prefix}_{key}"

    if isinstance(first, dict):
        signature = shape_signature(first)
        position = (TableKind.ARRAY_OF_OBJECTS, parent_name, key, signature)
        table = registry.find_positional(position)
        if table is None:
            table = registry.create(name_hint, TableKind.ARRAY_OF_OBJECTS, signature=signature, parent=parent)
            if parent is not None:
                table.set_foreign_key(f"{parent.name}_id")
            for member, value in first.items():
                if is_scalar(value):
                    table.add_column(member)
            registry.remember_positional(position, table)
        registry.annotate(path, table)
        for i, element in enumerate(arr):
            if isinstance(element, dict):
                _discover_object(element, registry, path + (i,), key, table, table, warned)
    elif is_scalar(first):
        position = (TableKind.ARRAY_OF_SCALARS, parent_name, key)
        table = registry.find_positional(position)
        if table is None:
            table = registry.create(name_hint, TableKind.ARRAY_OF_SCALARS, parent=parent)
            if parent is not None:
                table.set_foreign_key(f"{parent.name}_id")
            else:
                table.set_foreign_key(f"{table.name}_id")
            table.add_column("idx")
            table.add_column("value")
            registry.remember_positional(position, table)
        registry.annotate(path, table)
    else:
        logger.debug("Skipping nested array at %s", format_path(path))


def format_path(path):
    if not path:
        return "$"
    parts = ["$"]
    for step in path:
        if isinstance(step, int):
            parts.append(f"[{step}]")
        else:
            parts.append(f".{step}")
    return "".join(parts)
