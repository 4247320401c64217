""" Ports and packages described by CONTROL files

A port is a directory containing a CONTROL file with a single paragraph
describing how to build a library from source::

    Source: zlib
    Version: 1.2.11
    Description: A compression library
    Build-Depends: some-dependency

A built package has its own CONTROL file in the packages directory, under a
subdirectory named after the package and the triplet it was built for::

    Package: zlib
    Version: 1.2.11
    Architecture: x86-windows

:class:`SourceParagraph` and :class:`BinaryParagraph` hold the content of
these two kinds of paragraphs.  :func:`load_all_ports` loads every port of a
ports directory.

    >>> from portcontrol.parsing import parse_single_paragraph
    >>> port = SourceParagraph.from_paragraph(parse_single_paragraph(textwrap.dedent('''\\
    ...     Source: zlib
    ...     Version: 1.2.11
    ...     Build-Depends: bzip2, libpng
    ...     ''')))
    >>> port.name, port.version, port.depends
    ('zlib', '1.2.11', ['bzip2', 'libpng'])
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

import collections
import logging
import os

try:
    from typing import Dict, Iterable, List, Mapping, Optional
    from portcontrol.files import PathLike
except ImportError:
    pass

from portcontrol.errors import (
    ControlFileError,
    InvalidFieldValueError,
    MissingFieldError,
    SourceReadError,
)
from portcontrol.parsing import get_single_paragraph


logger = logging.getLogger(__name__)

CONTROL_FILE_NAME = 'CONTROL'


def _required_field(paragraph, field_name):
    # type: (Mapping[str, str], str) -> str
    try:
        value = paragraph[field_name]
    except KeyError:
        raise MissingFieldError(field_name) from None
    if not value.strip():
        raise InvalidFieldValueError(field_name, value)
    return value


def parse_depends(value):
    # type: (str) -> List[str]
    """Split a comma separated list of dependencies

    >>> parse_depends('zlib, bzip2,\\nlibpng')
    ['zlib', 'bzip2', 'libpng']
    >>> parse_depends('')
    []
    """
    return [d.strip() for d in value.split(',') if d.strip()]


class PackageSpec(object):
    """Identifies a package built for a given triplet"""

    __slots__ = ('name', 'triplet')

    def __init__(self, name, triplet):
        # type: (str, str) -> None
        self.name = name
        self.triplet = triplet

    @property
    def dir_name(self):
        # type: () -> str
        """Name of the package's directory inside the packages directory"""
        return "{name}_{triplet}".format(name=self.name, triplet=self.triplet)

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, PackageSpec):
            return NotImplemented
        return (self.name, self.triplet) == (other.name, other.triplet)

    def __hash__(self):
        # type: () -> int
        return hash((self.name, self.triplet))

    def __str__(self):
        # type: () -> str
        return "{name}:{triplet}".format(name=self.name, triplet=self.triplet)

    def __repr__(self):
        # type: () -> str
        return "PackageSpec({name!r}, {triplet!r})".format(name=self.name,
                                                           triplet=self.triplet)


class SourceParagraph(object):
    """The content of a port's CONTROL file"""

    _KNOWN_FIELDS = frozenset(('Source', 'Version', 'Description',
                               'Maintainer', 'Build-Depends'))

    def __init__(self, name, version, description='', maintainer='',
                 depends=None, unparsed_fields=None):
        # type: (str, str, str, str, Optional[List[str]], Optional[Dict[str, str]]) -> None
        self.name = name
        self.version = version
        self.description = description
        self.maintainer = maintainer
        self.depends = depends or []
        self.unparsed_fields = unparsed_fields or {}

    @classmethod
    def from_paragraph(cls, paragraph):
        # type: (Mapping[str, str]) -> SourceParagraph
        """Build a SourceParagraph from a parsed paragraph

        :raises MissingFieldError: if "Source" or "Version" is absent.
        :raises InvalidFieldValueError: if "Source" or "Version" is blank.
        """
        return cls(
            _required_field(paragraph, 'Source'),
            _required_field(paragraph, 'Version'),
            description=paragraph.get('Description', ''),
            maintainer=paragraph.get('Maintainer', ''),
            depends=parse_depends(paragraph.get('Build-Depends', '')),
            unparsed_fields={k: v for k, v in paragraph.items()
                             if k not in cls._KNOWN_FIELDS},
        )

    def __repr__(self):
        # type: () -> str
        return "SourceParagraph({name!r}, {version!r})".format(name=self.name,
                                                               version=self.version)


class BinaryParagraph(object):
    """The content of a built package's CONTROL file"""

    _KNOWN_FIELDS = frozenset(('Package', 'Version', 'Architecture',
                               'Description', 'Maintainer', 'Depends'))

    def __init__(self, spec, version, description='', maintainer='',
                 depends=None, unparsed_fields=None):
        # type: (PackageSpec, str, str, str, Optional[List[str]], Optional[Dict[str, str]]) -> None
        self.spec = spec
        self.version = version
        self.description = description
        self.maintainer = maintainer
        self.depends = depends or []
        self.unparsed_fields = unparsed_fields or {}

    @property
    def name(self):
        # type: () -> str
        return self.spec.name

    @classmethod
    def from_paragraph(cls, paragraph):
        # type: (Mapping[str, str]) -> BinaryParagraph
        """Build a BinaryParagraph from a parsed paragraph

        :raises MissingFieldError: if "Package", "Version" or "Architecture"
          is absent.
        :raises InvalidFieldValueError: if one of them is blank.
        """
        spec = PackageSpec(_required_field(paragraph, 'Package'),
                           _required_field(paragraph, 'Architecture'))
        return cls(
            spec,
            _required_field(paragraph, 'Version'),
            description=paragraph.get('Description', ''),
            maintainer=paragraph.get('Maintainer', ''),
            depends=parse_depends(paragraph.get('Depends', '')),
            unparsed_fields={k: v for k, v in paragraph.items()
                             if k not in cls._KNOWN_FIELDS},
        )

    def __repr__(self):
        # type: () -> str
        return "BinaryParagraph({spec!r}, {version!r})".format(spec=self.spec,
                                                               version=self.version)


def try_load_port(port_dir, *, encoding='utf-8'):
    # type: (PathLike, str) -> SourceParagraph
    """Load the CONTROL file of the port in port_dir

    :raises ControlFileError: (or a subclass) if the file cannot be read,
      parsed or converted.
    """
    control_path = os.path.join(os.fspath(port_dir), CONTROL_FILE_NAME)
    return SourceParagraph.from_paragraph(get_single_paragraph(control_path,
                                                               encoding=encoding))


def try_load_cached_package(packages_dir, spec, *, encoding='utf-8'):
    # type: (PathLike, PackageSpec, str) -> BinaryParagraph
    """Load the CONTROL file of the built package spec from packages_dir"""
    control_path = os.path.join(os.fspath(packages_dir), spec.dir_name, CONTROL_FILE_NAME)
    return BinaryParagraph.from_paragraph(get_single_paragraph(control_path,
                                                               encoding=encoding))


SkippedPort = collections.namedtuple('SkippedPort', ['path', 'error'])
PortLoadResult = collections.namedtuple('PortLoadResult', ['ports', 'skipped'])


def load_all_ports(ports_dir, *, strict=False, encoding='utf-8'):
    # type: (PathLike, bool, str) -> PortLoadResult
    """Load every port found in ports_dir

    Each subdirectory of ports_dir is loaded with :func:`try_load_port`, in
    the order of their names.

    :param strict: If True, the first port that fails to load aborts the
      whole operation by raising its error.  Otherwise (the default) the
      failure is logged as a warning, recorded in the ``skipped`` part of the
      result and the remaining ports are loaded.
    :returns: A PortLoadResult whose ``ports`` is the list of SourceParagraph
      that loaded and whose ``skipped`` is a list of SkippedPort(path, error).
    :raises SourceReadError: if ports_dir itself cannot be listed.
    """
    ports_dir = os.fspath(ports_dir)
    try:
        entries = sorted(os.listdir(ports_dir))
    except OSError as e:
        raise SourceReadError(e.errno, e.strerror, ports_dir) from e

    ports = []  # type: List[SourceParagraph]
    skipped = []  # type: List[SkippedPort]
    for entry in entries:
        port_dir = os.path.join(ports_dir, entry)
        if not os.path.isdir(port_dir):
            continue
        try:
            ports.append(try_load_port(port_dir, encoding=encoding))
        except ControlFileError as e:
            if strict:
                raise
            logger.warning("Skipping port %s: %s", port_dir, e)
            skipped.append(SkippedPort(port_dir, e))

    logger.debug("Loaded %d port(s) from %s, skipped %d", len(ports), ports_dir,
                 len(skipped))
    return PortLoadResult(ports, skipped)


def extract_port_names_and_versions(ports):
    # type: (Iterable[SourceParagraph]) -> Dict[str, str]
    """Map the name of each port to its version, sorted by name

    If a name occurs more than once, the first port with that name wins.
    """
    names_and_versions = {}  # type: Dict[str, str]
    for port in ports:
        names_and_versions.setdefault(port.name, port.version)
    return dict(sorted(names_and_versions.items()))
