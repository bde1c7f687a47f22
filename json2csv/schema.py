# Author: Michael Welter <me@mikinho.com>
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# THE SOFTWARE.

"""
Table schemas, the run-wide table registry and the shape signature used to
unify objects of the same shape into one table.
"""

import logging
import re
from enum import Enum

logger = logging.getLogger(__name__)

MAX_COLUMNS = 128
# id, foreign key, idx and value of a junction table
MIN_COLUMNS = 4
EMPTY_SIGNATURE = "{}"


def is_scalar(value):
    return value is None or isinstance(value, (str, int, float, bool))


def shape_signature(obj):
    keys = sorted(k for k, v in obj.items() if is_scalar(v))
    if not keys:
        return EMPTY_SIGNATURE
    return ",".join(keys)


class TableKind(Enum):
    OBJECT = "object"
    ARRAY_OF_OBJECTS = "array_of_objects"
    ARRAY_OF_SCALARS = "array_of_scalars"


class TableSchema:
    def __init__(self, name, kind, shape_signature="", parent=None, max_columns=MAX_COLUMNS):
        self.name = name
        self.kind = kind
        self.shape_signature = shape_signature
        self.parent = parent
        self.parent_fk_column = ""
        self.columns = ["id"]
        self.max_columns = max_columns
        self.next_primary_key = 0
        self.row_count = 0
        self.profiles = {}
        self.file = None
        self.dropped_columns = set()

    def __repr__(self):
        return f"TableSchema({self.name!r}, {self.kind.value}, columns={self.columns!r})"

    def add_column(self, name):
        """Append a column unless it exists; returns False when the limit drops it."""
        if name in self.columns:
            return True
        if len(self.columns) >= self.max_columns:
            if name not in self.dropped_columns:
                self.dropped_columns.add(name)
                logger.warning(
                    "Max columns (%d) reached for table %s, dropping column %r",
                    self.max_columns, self.name, name,
                )
            return False
        self.columns.append(name)
        return True

    def set_foreign_key(self, column):
        self.parent_fk_column = column
        self.add_column(column)

    def allocate_key(self):
        self.next_primary_key += 1
        return self.next_primary_key


class Registry:
    """
    Every table inferred during one run, in creation order.

    Discovery appends tables and records which table each tree position
    resolves to; Population only reads both.
    """

    def __init__(self, base_name, max_columns=MAX_COLUMNS):
        if max_columns < MIN_COLUMNS:
            raise ValueError(f"max_columns must be at least {MIN_COLUMNS}, got {max_columns}")
        self.base_name = base_name
        self.max_columns = max_columns
        self.tables = []
        self._by_name = {}
        self._by_position = {}
        self._annotations = {}

    def __iter__(self):
        return iter(self.tables)

    def __len__(self):
        return len(self.tables)

    def __getitem__(self, name):
        return self._by_name[name]

    def __contains__(self, name):
        return name in self._by_name

    def unique_name(self, hint):
        # table names double as file names
        hint = re.sub(r"[\\/\x00]", "_", hint) or "_"
        name = hint
        suffix = 1
        while name in self._by_name:
            name = f"{hint}_{suffix}"
            suffix += 1
        return name

    def create(self, hint, kind, signature="", parent=None):
        table = TableSchema(
            self.unique_name(hint),
            kind,
            shape_signature=signature,
            parent=parent,
            max_columns=self.max_columns,
        )
        self.tables.append(table)
        self._by_name[table.name] = table
        logger.debug("Created %s table %s (signature %r)", kind.value, table.name, signature)
        return table

    def find_object_table(self, signature):
        for table in self.tables:
            if table.kind is TableKind.OBJECT and table.shape_signature == signature:
                return table
        return None

    def find_positional(self, key):
        return self._by_position.get(key)

    def remember_positional(self, key, table):
        self._by_position[key] = table

    def annotate(self, path, table):
        self._annotations[path] = table

    def table_at(self, path):
        return self._annotations.get(path)
