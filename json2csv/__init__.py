# Author: Michael Welter <me@mikinho.com>
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# THE SOFTWARE.

"""Infer normalized relational tables from JSON and write them as CSV."""

from .discovery import discover
from .engine import convert
from .populate import populate
from .schema import Registry, TableKind, TableSchema, shape_signature

__version__ = "0.1.0"

__all__ = [
    "Registry",
    "TableKind",
    "TableSchema",
    "convert",
    "discover",
    "populate",
    "shape_signature",
]
