# Author: Michael Welter <me@mikinho.com>
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# THE SOFTWARE.

"""
Column type profiling for the --describe summary.

Values are observed one at a time while rows are written, so nothing but a
handful of flags and lengths is kept per column.
"""

import math
import re
from decimal import Decimal, InvalidOperation

from dateutil.parser import parse as parse_date, ParserError

from .schema import TableKind


class ColumnProfile:
    def __init__(self):
        self.has_int = self.has_float = self.has_date = False
        self.has_datetime = self.has_str = self.has_bool = False
        self.max_len = self.max_prec = self.max_scale = 0

    def _decimal(self, d):
        prec = len(d.as_tuple().digits)
        scale = max(-d.as_tuple().exponent, 0)
        self.max_prec = max(self.max_prec, prec)
        self.max_scale = max(self.max_scale, scale)

    def _text(self, length):
        self.has_str = True
        self.max_len = max(self.max_len, length)

    def observe(self, v):
        if v is None:
            return
        if isinstance(v, bool):
            self.has_bool = True
            return
        if isinstance(v, int):
            self.has_int = True
            return
        if isinstance(v, float):
            self.has_float = True
            if math.isfinite(v):
                try:
                    self._decimal(Decimal(str(v)))
                except InvalidOperation:
                    pass
            return

        s = str(v).strip()
        if not s:
            return

        if re.fullmatch(r"[+-]?\d+", s):
            self.has_int = True
            return

        if re.fullmatch(r"[+-]?(?:\d+\.\d*|\.\d+)", s):
            self.has_float = True
            try:
                self._decimal(Decimal(s))
            except InvalidOperation:
                pass
            return

        if s.lower() in ("true", "false", "yes", "no"):
            self.has_bool = True
            return

        try:
            parse_date(s, fuzzy=False)
            if re.search(r"\d{1,2}:\d{2}(:\d{2})?", s):
                self.has_datetime = True
            else:
                self.has_date = True
            return
        except (ParserError, ValueError, OverflowError):
            pass

        self._text(len(s))

    def sql_type(self):
        if self.has_datetime and not any([self.has_str, self.has_float, self.has_int, self.has_date, self.has_bool]):
            return "DATETIME"
        if self.has_date and not any([self.has_str, self.has_float, self.has_int, self.has_datetime, self.has_bool]):
            return "DATE"
        if self.has_bool and not any([self.has_str, self.has_float, self.has_int, self.has_date, self.has_datetime]):
            return "BOOLEAN"
        if self.has_float and not self.has_str:
            return f"DECIMAL({max(1, self.max_prec)},{self.max_scale})"
        if self.has_int and not any([self.has_float, self.has_str, self.has_date, self.has_datetime, self.has_bool]):
            return "INTEGER"
        return f"VARCHAR({max(1, self.max_len)})"


def column_type(table, column):
    if column == "id" or (table.parent_fk_column and column == table.parent_fk_column):
        return "INTEGER"
    if column == "idx" and table.kind is TableKind.ARRAY_OF_SCALARS:
        return "INTEGER"
    prof = table.profiles.get(column)
    if prof is None:
        return "VARCHAR(1)"
    return prof.sql_type()


def describe_tables(registry):
    blocks = []
    for table in registry:
        head = f"{table.name} ({table.kind.value}"
        if table.parent is not None:
            head += f", parent {table.parent.name}"
        head += f", {table.row_count} rows)"
        lines = [head]
        for column in table.columns:
            lines.append(f"    {column} {column_type(table, column)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
