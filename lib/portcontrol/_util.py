import re

try:
    from typing import AbstractSet, Optional, Tuple
except ImportError:
    pass


# Returned by Cursor.peek() once the end of the text has been reached.  The
# parser treats it as a line terminator as well as the end of input.
END_OF_INPUT = ''

_RE_LINE_TERMINATOR = re.compile(r'\r\n|\r|\n')


class Cursor:
    """Position tracking view over an immutable text

    Reading past the end is not an error; the cursor just keeps returning
    END_OF_INPUT.

    >>> cursor = Cursor('ab')
    >>> cursor.peek()
    'a'
    >>> cursor.advance()
    'b'
    >>> cursor.advance() == END_OF_INPUT
    True
    >>> cursor.advance() == END_OF_INPUT
    True
    >>> cursor.position
    2
    """

    __slots__ = ('_text', '_pos', '_end')

    def __init__(self, text):
        # type: (str) -> None
        self._text = text
        self._pos = 0
        self._end = len(text)

    @property
    def position(self):
        # type: () -> int
        return self._pos

    def peek(self):
        # type: () -> str
        if self._pos < self._end:
            return self._text[self._pos]
        return END_OF_INPUT

    def advance(self):
        # type: () -> str
        if self._pos < self._end:
            self._pos += 1
        return self.peek()

    def skip_while(self, chars):
        # type: (AbstractSet[str]) -> str
        """Advance while the current character is in chars; return the new current character"""
        ch = self.peek()
        while ch in chars and ch != END_OF_INPUT:
            ch = self.advance()
        return ch

    def skip_until(self, chars):
        # type: (AbstractSet[str]) -> str
        """Advance until the current character is in chars (or the input ends)"""
        ch = self.peek()
        while ch not in chars and ch != END_OF_INPUT:
            ch = self.advance()
        return ch

    def text_since(self, start):
        # type: (int) -> str
        return self._text[start:self._pos]

    def line_context(self, position=None):
        # type: (Optional[int]) -> Tuple[int, int, str]
        """Describe where position (default: the current position) is

        Returns the 1-based line number and column plus the text of the
        physical line.  "\\r\\n", "\\n" and "\\r" each end one line.

        >>> Cursor('A: 1\\r\\nB 2\\n').line_context(9)
        (2, 4, 'B 2')
        """
        if position is None:
            position = self._pos
        position = min(position, self._end)
        line_no = 1
        line_start = 0
        for m in _RE_LINE_TERMINATOR.finditer(self._text, 0, position):
            line_no += 1
            line_start = m.end()
        m = _RE_LINE_TERMINATOR.search(self._text, position)
        line_end = m.start() if m is not None else self._end
        return line_no, position - line_start + 1, self._text[line_start:line_end]
