"""Character cursor over an immutable text.

The cursor is the only thing that moves during a scan. Recognizers look
ahead with peek(k) and never consume; the lexer consumes with next().

End of input is the empty string EOF, never an exception.

Thread Safety:
CharCursor is mutable and owned by a single analysis call.

"""

from __future__ import annotations

from lexemas.location import Position

EOF = ""


class CharCursor:
    """Forward-only cursor with 1-based line/column tracking.

    CR, LF and CRLF each count as exactly one line break: a CR immediately
    followed by LF is consumed as two next() calls but increments the line
    only once.

    Usage:
            >>> cursor = CharCursor("a\\r\\nb")
            >>> cursor.next(), cursor.next(), cursor.next()
            ('a', '\\r', '\\n')
            >>> cursor.position()
            Position(line=2, column=1)

    """

    __slots__ = ("_text", "_length", "_index", "_line", "_column", "_after_cr")

    def __init__(self, text: str) -> None:
        """Create a cursor at the start of text.

        Args:
            text: Text to scan

        Raises:
            TypeError: If text is None.
        """
        if text is None:
            raise TypeError("text must not be None")
        self._text = text
        self._length = len(text)
        self._index = 0
        self._line = 1
        self._column = 1
        self._after_cr = False

    @property
    def text(self) -> str:
        """The scanned text."""
        return self._text

    @property
    def index(self) -> int:
        """0-based offset of the next unread character."""
        return self._index

    def __len__(self) -> int:
        return self._length

    def eof(self) -> bool:
        """True when every character has been consumed."""
        return self._index >= self._length

    def peek(self, k: int = 0) -> str:
        """Return the character k positions ahead without consuming it.

        Args:
            k: Lookahead distance (0 = next unread character)

        Returns:
            The character, or EOF when out of range.
        """
        pos = self._index + k
        if pos < 0 or pos >= self._length:
            return EOF
        return self._text[pos]

    def startswith(self, s: str, offset: int = 0) -> bool:
        """Check if the unread text at offset begins with s (non-consuming).

        An empty s never matches.
        """
        if not s:
            return False
        start = self._index + offset
        return self._text.startswith(s, start)

    def next(self) -> str:
        """Consume and return one character, updating line/column.

        Returns:
            The consumed character, or EOF at end of input.
        """
        if self._index >= self._length:
            return EOF

        char = self._text[self._index]
        self._index += 1

        if char == "\r":
            self._line += 1
            self._column = 1
            self._after_cr = True
        elif char == "\n":
            if self._after_cr:
                # Second half of CRLF: the line was already counted
                self._after_cr = False
            else:
                self._line += 1
                self._column = 1
        else:
            self._column += 1
            self._after_cr = False

        return char

    def advance(self, length: int) -> None:
        """Consume up to length characters (stops at EOF)."""
        for _ in range(length):
            if self._index >= self._length:
                break
            self.next()

    def position(self) -> Position:
        """Position of the next unread character."""
        return Position(self._line, self._column)

    def slice(self, start: int, length: int) -> str:
        """Source substring [start, start + length), clamped to the text."""
        if length <= 0 or start < 0 or start >= self._length:
            return ""
        return self._text[start : min(self._length, start + length)]
