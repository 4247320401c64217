# -*- coding: utf-8 -*- vim: fileencoding=utf-8 :

""" Parser for CONTROL files

A CONTROL file consists of one or more paragraphs separated by blank lines.
Each paragraph is a series of "Field-Name: value" lines, where a value can be
continued on the following lines by starting them with whitespace::

    >>> from portcontrol.parsing import parse_paragraphs
    >>> text = '''\\
    ... Source: zlib
    ... Version: 1.2.11
    ... Description: A compression library
    ...   with a long description
    ...
    ... Source: bzip2
    ... Version: 1.0.6
    ... '''
    >>> paragraphs = parse_paragraphs(text)
    >>> len(paragraphs)
    2
    >>> paragraphs[0]['Description']
    'A compression library\\nwith a long description'
    >>> paragraphs[1]
    {'Source': 'bzip2', 'Version': '1.0.6'}

The rules for folding are:

 * A line starting with an ASCII letter or digit begins a new field.
 * A line that is empty or consists only of spaces and tabs ends the current
   paragraph (as does the end of the input).
 * Any other line continues the value of the current field.  Its leading
   whitespace is removed and it is joined to the value with a single "\\n",
   no matter which line ending ("\\r\\n", "\\n" or "\\r") the text uses.

Field names consist of ASCII letters, digits and hyphens and are case
sensitive.  A paragraph must not contain the same field twice.

All of the functions raise a subclass of
:class:`portcontrol.errors.ControlFileError` on failure; nothing is returned
for a text that does not parse completely.
"""

# Copyright (C) 2026 The portcontrol developers
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA

import logging
import string

try:
    from typing import Dict, List, Optional, Type, Union
    from portcontrol.files import PathLike

    Paragraph = Dict[str, str]
except ImportError:
    pass

from portcontrol._util import Cursor, END_OF_INPUT
from portcontrol.errors import (
    ControlFileParseError,
    DuplicateFieldError,
    ExpectedExactlyOneParagraphError,
    MalformedFieldNameError,
)
from portcontrol.files import decode_contents, read_contents


logger = logging.getLogger(__name__)

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_FIELD_NAME_CHARS = _ALPHANUMERIC | {'-'}
_HORIZONTAL_SPACE = frozenset(' \t')
_LINE_END = frozenset(('\r', '\n', END_OF_INPUT))
_PARAGRAPH_SEPARATOR = frozenset('\r\n \t')


def _parse_error(error_class, cursor, reason, position=None):
    # type: (Type[ControlFileParseError], Cursor, str, Optional[int]) -> ControlFileParseError
    if position is None:
        position = cursor.position
    line_no, column, line = cursor.line_context(position)
    return error_class(reason, position, line_no, column, line)


def _scan_field_name(cursor, allow_empty_field_names):
    # type: (Cursor, bool) -> str
    start = cursor.position
    ch = cursor.skip_while(_FIELD_NAME_CHARS)
    if ch != ':':
        if ch in _LINE_END:
            reason = "Expected ':' after field name, found end of line"
        else:
            reason = "Expected ':' after field name, found {ch!r}".format(ch=ch)
        raise _parse_error(MalformedFieldNameError, cursor, reason)
    field_name = cursor.text_since(start)
    if not field_name and not allow_empty_field_names:
        raise _parse_error(MalformedFieldNameError, cursor, "Empty field name")

    cursor.advance()
    cursor.skip_while(_HORIZONTAL_SPACE)
    return field_name


def _scan_field_value(cursor):
    # type: (Cursor) -> str
    value_parts = []  # type: List[str]
    line_start = cursor.position
    while True:
        # The rest of the current line belongs to the value
        ch = cursor.skip_until(_LINE_END)
        value_parts.append(cursor.text_since(line_start))

        if ch == '\r':
            ch = cursor.advance()
        if ch == '\n':
            ch = cursor.advance()

        if ch in _ALPHANUMERIC:
            # Start of the next field
            return ''.join(value_parts)

        ch = cursor.skip_while(_HORIZONTAL_SPACE)
        if ch in _LINE_END:
            # Blank line (or end of input); it ends the paragraph as well.
            # The cursor is left on its line ending for _parse_paragraph.
            return ''.join(value_parts)

        value_parts.append('\n')
        line_start = cursor.position


def _parse_paragraph(cursor, paragraph_no, allow_empty_field_names):
    # type: (Cursor, int, bool) -> Paragraph
    paragraph = {}  # type: Paragraph
    while True:
        name_start = cursor.position
        field_name = _scan_field_name(cursor, allow_empty_field_names)
        if field_name in paragraph:
            line_no, column, line = cursor.line_context(name_start)
            raise DuplicateFieldError(field_name, paragraph_no, name_start,
                                      line_no, column, line)
        paragraph[field_name] = _scan_field_value(cursor)
        if cursor.peek() in _LINE_END:
            return paragraph


def _parse_document(text, allow_empty_field_names):
    # type: (str, bool) -> List[Paragraph]
    cursor = Cursor(text)
    paragraphs = []  # type: List[Paragraph]
    while cursor.skip_while(_PARAGRAPH_SEPARATOR) != END_OF_INPUT:
        paragraphs.append(_parse_paragraph(cursor, len(paragraphs),
                                           allow_empty_field_names))
    return paragraphs


def _as_str(text, encoding):
    # type: (Union[str, bytes], str) -> str
    if isinstance(text, bytes):
        return decode_contents(text, encoding, 'in-memory text')
    return text


def parse_paragraphs(text,  # type: Union[str, bytes]
                     *,
                     encoding='utf-8',  # type: str
                     allow_empty_field_names=False,  # type: bool
                     ):
    # type: (...) -> List[Paragraph]
    """Parse every paragraph of a CONTROL file

    :param text: The full content of the file.  If given as bytes, it is
      decoded with encoding first.
    :param encoding: The encoding used to decode bytes input.
    :param allow_empty_field_names: If True, a line starting with ":" is a
      field with the empty string as name.  By default such a line raises
      MalformedFieldNameError.
    :returns: The paragraphs in the order they appear in text.  A text with
      no paragraphs (e.g. the empty string) gives an empty list.
    :raises MalformedFieldNameError: if a field name is not followed by ":".
    :raises DuplicateFieldError: if a paragraph repeats a field name.
    :raises SourceReadError: if bytes text is not valid in encoding.

    >>> parse_paragraphs('A: 1\\r\\nB: 2\\r\\n\\r\\nC: 3')
    [{'A': '1', 'B': '2'}, {'C': '3'}]
    >>> parse_paragraphs('')
    []
    """
    return _parse_document(_as_str(text, encoding), allow_empty_field_names)


def parse_single_paragraph(text,  # type: Union[str, bytes]
                           *,
                           encoding='utf-8',  # type: str
                           allow_empty_field_names=False,  # type: bool
                           ):
    # type: (...) -> Paragraph
    """Parse a CONTROL file that must contain exactly one paragraph

    Accepts the same arguments as :func:`parse_paragraphs`.

    :raises ExpectedExactlyOneParagraphError: if text contains no paragraphs
      or more than one.
    """
    paragraphs = parse_paragraphs(text, encoding=encoding,
                                  allow_empty_field_names=allow_empty_field_names)
    if len(paragraphs) != 1:
        raise ExpectedExactlyOneParagraphError(len(paragraphs))
    return paragraphs[0]


def get_paragraphs(path,  # type: PathLike
                   *,
                   encoding='utf-8',  # type: str
                   allow_empty_field_names=False,  # type: bool
                   ):
    # type: (...) -> List[Paragraph]
    """Read the file at path and parse all of its paragraphs

    :raises SourceReadError: if the file cannot be read.
    """
    paragraphs = parse_paragraphs(read_contents(path, encoding=encoding),
                                  allow_empty_field_names=allow_empty_field_names)
    logger.debug("Parsed %d paragraph(s) from %s", len(paragraphs), path)
    return paragraphs


def get_single_paragraph(path,  # type: PathLike
                         *,
                         encoding='utf-8',  # type: str
                         allow_empty_field_names=False,  # type: bool
                         ):
    # type: (...) -> Paragraph
    """Read the file at path, which must contain exactly one paragraph

    :raises SourceReadError: if the file cannot be read.
    :raises ExpectedExactlyOneParagraphError: if the file does not contain
      exactly one paragraph.
    """
    paragraph = parse_single_paragraph(read_contents(path, encoding=encoding),
                                       allow_empty_field_names=allow_empty_field_names)
    logger.debug("Parsed %d field(s) from %s", len(paragraph), path)
    return paragraph


if __name__ == "__main__":  # pragma: no cover
    import doctest
    doctest.testmod()
