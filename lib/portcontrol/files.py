""" Reading control files from disk """

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

import os

from portcontrol.errors import SourceReadError

try:
    from typing import Union
    PathLike = Union[str, 'os.PathLike[str]']
except ImportError:
    pass


def decode_contents(data, encoding, source):
    # type: (bytes, str, str) -> str
    """Decode the raw content of a control file

    :param source: Names where data came from, for the error message.
    :raises SourceReadError: if data is not valid in the given encoding.
    """
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        msg = "Could not decode {source} as {encoding}: {e}"
        raise SourceReadError(msg.format(source=source, encoding=encoding, e=e)) from e


def read_contents(path, *, encoding='utf-8'):
    # type: (PathLike, str) -> str
    """Return the full text of the file at path

    The file is read in binary mode so line endings reach the parser exactly
    as they are on disk.

    :raises SourceReadError: if the file cannot be opened or read, or if its
      content is not valid in the given encoding.
    """
    filename = os.fspath(path)
    try:
        with open(filename, 'rb') as fd:
            data = fd.read()
    except OSError as e:
        raise SourceReadError(e.errno, e.strerror, filename) from e
    return decode_contents(data, encoding, filename)
