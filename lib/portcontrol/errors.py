""" Exceptions raised while reading and parsing control files

Every failure is reported as an exception derived from
:class:`ControlFileError`, so a caller working through many files can catch
it, report it and move on to the next file.  The parse errors also derive from
:class:`ValueError` and the read error from :class:`OSError`, so code that
only knows about the builtin categories keeps working.
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

try:
    from typing import Optional
except ImportError:
    pass


class ControlFileError(Exception):
    """Base class of all errors raised by portcontrol"""


class ControlFileParseError(ControlFileError, ValueError):
    """The text is not valid control file syntax

    The parse of the whole text is abandoned; there is no partial result.
    """

    is_user_error = True

    def __init__(self, reason, offset, line_no, column, line):
        # type: (str, int, int, int, str) -> None
        self.reason = reason
        self.offset = offset
        self.line_no = line_no
        self.column = column
        self.line = line
        super().__init__(reason)

    def __str__(self):
        # type: () -> str
        return '{reason} (line {line_no}, column {column}): "{line}"'.format(
            reason=self.reason,
            line_no=self.line_no,
            column=self.column,
            line=self.line,
        )


class MalformedFieldNameError(ControlFileParseError):
    """A field name was not terminated by a colon (or was empty)"""


class DuplicateFieldError(ControlFileParseError):
    """A field name occurred twice within one paragraph"""

    def __init__(self, field_name, paragraph_no, offset, line_no, column, line):
        # type: (str, int, int, int, int, str) -> None
        self.field_name = field_name
        self.paragraph_no = paragraph_no
        msg = 'Duplicate field "{field_name}" in paragraph number {no}'
        super().__init__(msg.format(field_name=field_name, no=paragraph_no),
                         offset, line_no, column, line)


class ExpectedExactlyOneParagraphError(ControlFileError, ValueError):
    """The text was expected to hold a single paragraph but did not"""

    def __init__(self, paragraph_count):
        # type: (int) -> None
        self.paragraph_count = paragraph_count
        super().__init__(paragraph_count)

    def __str__(self):
        # type: () -> str
        return "Expected exactly one paragraph, found {count}".format(
            count=self.paragraph_count)


class SourceReadError(ControlFileError, OSError):
    """The contents of a control file could not be read

    Carries the ``errno``, ``strerror`` and ``filename`` of the underlying
    :class:`OSError` when there is one.
    """


class ParagraphConversionError(ControlFileError, ValueError):
    """A parsed paragraph does not describe a valid port or package"""

    is_user_error = True

    def __init__(self, field_name, message=None):
        # type: (str, Optional[str]) -> None
        self.field_name = field_name
        super().__init__(message or field_name)


class MissingFieldError(ParagraphConversionError):
    """A required field is absent from the paragraph"""

    def __init__(self, field_name):
        # type: (str) -> None
        super().__init__(field_name,
                         'Missing required field "{f}"'.format(f=field_name))


class InvalidFieldValueError(ParagraphConversionError):
    """A required field is present but its value is unusable"""

    def __init__(self, field_name, value):
        # type: (str, str) -> None
        self.value = value
        super().__init__(field_name,
                         'Invalid value for field "{f}": "{v}"'.format(
                             f=field_name, v=value.replace('\n', '\\n')))
