import errno
import os
import pathlib

import pytest

from portcontrol.errors import ControlFileError, SourceReadError
from portcontrol.files import read_contents

try:
    from typing import Any, Callable
except ImportError:
    pass


class TestReadContents:

    def test_line_endings_are_preserved(self, write_control):
        # type: (Callable[..., str]) -> None
        directory = write_control('port', b'A: 1\r\nB: 2\rC: 3\n')
        path = os.path.join(directory, 'CONTROL')
        assert read_contents(path) == 'A: 1\r\nB: 2\rC: 3\n'
        assert read_contents(pathlib.Path(path)) == 'A: 1\r\nB: 2\rC: 3\n'

    def test_missing_file(self, tmp_path):
        # type: (Any) -> None
        path = os.path.join(str(tmp_path), 'CONTROL')
        with pytest.raises(SourceReadError) as excinfo:
            read_contents(path)
        err = excinfo.value
        assert err.errno == errno.ENOENT
        assert err.filename == path
        assert isinstance(err, OSError)
        assert isinstance(err, ControlFileError)
        assert isinstance(err.__cause__, FileNotFoundError)

    def test_directory_is_not_a_file(self, tmp_path):
        # type: (Any) -> None
        with pytest.raises(SourceReadError):
            read_contents(str(tmp_path))

    def test_undecodable_content(self, write_control):
        # type: (Callable[..., str]) -> None
        directory = write_control('port', b'Source: \xff\xfe\n')
        path = os.path.join(directory, 'CONTROL')
        with pytest.raises(SourceReadError) as excinfo:
            read_contents(path)
        assert path in str(excinfo.value)
        assert read_contents(path, encoding='latin-1') == 'Source: \xff\xfe\n'
