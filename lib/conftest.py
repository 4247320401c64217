import os
import textwrap

try:
    from typing import Any, Callable, Dict
except ImportError:
    pass

import pytest


@pytest.fixture(autouse=True)
def doctest_add_textwrap(doctest_namespace):
    # type: (Dict[str, Any]) -> None
    # Names made available to all doctests.  Use sparingly.
    doctest_namespace['textwrap'] = textwrap


@pytest.fixture()
def write_control(tmp_path):
    # type: (Any) -> Callable[..., str]
    """Return a helper writing a CONTROL file below tmp_path

    The helper takes the subdirectory (relative to tmp_path) and the content
    of the file (str, or bytes to control the line endings and encoding
    exactly) and returns the path of the directory.
    """
    def _write(subdir, content):
        # type: (str, Any) -> str
        directory = os.path.join(str(tmp_path), subdir)
        os.makedirs(directory, exist_ok=True)
        if isinstance(content, str):
            content = content.encode('utf-8')
        with open(os.path.join(directory, 'CONTROL'), 'wb') as fd:
            fd.write(content)
        return directory

    return _write
