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

# Re-exported with "from X import Y as Y" so mypy --strict treats the names
# as part of the public interface.

# pylint: disable=useless-import-alias
from portcontrol.parsing import (
    parse_paragraphs as parse_paragraphs,
    parse_single_paragraph as parse_single_paragraph,
    get_paragraphs as get_paragraphs,
    get_single_paragraph as get_single_paragraph,
)
from portcontrol.errors import (
    ControlFileError as ControlFileError,
    ControlFileParseError as ControlFileParseError,
    MalformedFieldNameError as MalformedFieldNameError,
    DuplicateFieldError as DuplicateFieldError,
    ExpectedExactlyOneParagraphError as ExpectedExactlyOneParagraphError,
    SourceReadError as SourceReadError,
    ParagraphConversionError as ParagraphConversionError,
    MissingFieldError as MissingFieldError,
    InvalidFieldValueError as InvalidFieldValueError,
)

__all__ = [
    'parse_paragraphs',
    'parse_single_paragraph',
    'get_paragraphs',
    'get_single_paragraph',
    'ControlFileError',
    'ControlFileParseError',
    'MalformedFieldNameError',
    'DuplicateFieldError',
    'ExpectedExactlyOneParagraphError',
    'SourceReadError',
    'ParagraphConversionError',
    'MissingFieldError',
    'InvalidFieldValueError',
]
