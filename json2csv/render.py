# Author: Michael Welter <me@mikinho.com>
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# THE SOFTWARE.

"""CSV encoding of JSON scalars."""

_NEEDS_QUOTING = (",", '"', "\n", "\r")


def escape_field(text):
    # an empty string stays distinguishable from a null field
    if text == "":
        return '""'
    if any(c in text for c in _NEEDS_QUOTING):
        safe = text.replace('"', '""')
        return f'"{safe}"'
    return text


def format_number(value):
    if isinstance(value, int):
        return str(value)
    txt = repr(value)
    if txt.endswith(".0"):
        txt = txt[:-2]
    return txt


def render_scalar(value):
    """Render a JSON scalar as a CSV field; None, objects and arrays render empty."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return escape_field(value)
    return ""


def format_row(fields):
    return ",".join(fields)


def format_header(columns):
    return format_row(escape_field(c) for c in columns)
