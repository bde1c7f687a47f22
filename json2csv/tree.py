# Author: Michael Welter <me@mikinho.com>
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# THE SOFTWARE.

"""Indented dump of a parsed JSON value, for --print-ast."""

from .render import format_number

INDENT = "  "


def format_tree(node, level=0):
    lines = []
    _format_node(node, level, lines)
    return "\n".join(lines)


def _format_node(node, level, lines):
    pad = INDENT * level
    if node is None:
        lines.append(f"{pad}NULL")
    elif isinstance(node, bool):
        lines.append(f"{pad}BOOLEAN: {'true' if node else 'false'}")
    elif isinstance(node, (int, float)):
        lines.append(f"{pad}NUMBER: {format_number(node)}")
    elif isinstance(node, str):
        lines.append(f'{pad}STRING: "{node}"')
    elif isinstance(node, list):
        lines.append(f"{pad}ARRAY ({len(node)} elements):")
        for i, element in enumerate(node):
            lines.append(f"{pad}{INDENT}[{i}]:")
            _format_node(element, level + 2, lines)
        if not node:
            lines.append(f"{pad}{INDENT}(empty)")
    elif isinstance(node, dict):
        lines.append(f"{pad}OBJECT ({len(node)} members):")
        for key, value in node.items():
            lines.append(f'{pad}{INDENT}"{key}":')
            _format_node(value, level + 2, lines)
        if not node:
            lines.append(f"{pad}{INDENT}(empty)")
    else:
        raise TypeError(f"Not a JSON value: {type(node).__name__}")
