"""Line and block comment recognizer mixin."""

from __future__ import annotations

from lexemas.charsets import LINE_BREAKS
from lexemas.config import CommentDelimiters
from lexemas.errors import LexErrorKind
from lexemas.lexer.cursor import EOF, CharCursor
from lexemas.lexer.recognition import NO_MATCH, Recognition


class CommentRecognizerMixin:
    """Mixin providing comment recognition.

    Comments never need a token of their own: the lexer discards them
    unless asked to surface them.
    """

    _comments: CommentDelimiters

    def _recognize_line_comment(self, cursor: CharCursor) -> Recognition:
        """Try to recognize a line comment.

        Spans from the prefix up to, but excluding, the next CR/LF or EOF.
        A line comment has no closing requirement, so it is never an error.

        Args:
            cursor: Scan cursor (not consumed)

        Returns:
            Match covering the comment, or NO_MATCH.
        """
        prefix = self._comments.line
        if not cursor.startswith(prefix):
            return NO_MATCH

        offset = len(prefix)
        while True:
            char = cursor.peek(offset)
            if char == EOF or char in LINE_BREAKS:
                break
            offset += 1
        return Recognition.match(offset)

    def _recognize_block_comment(self, cursor: CharCursor) -> Recognition:
        """Try to recognize a block comment.

        The closing delimiter is searched after the opening one, so the two
        never share characters ("/*/" is not a closed comment).

        Args:
            cursor: Scan cursor (not consumed)

        Returns:
            Match through the closing delimiter; an error match through EOF
            when the comment is never closed; NO_MATCH otherwise.
        """
        opening = self._comments.block_start
        closing = self._comments.block_end
        if not closing or not cursor.startswith(opening):
            return NO_MATCH

        start = cursor.index
        end = cursor.text.find(closing, start + len(opening))
        if end == -1:
            return Recognition.error(
                len(cursor) - start,
                LexErrorKind.UNTERMINATED_BLOCK_COMMENT.message,
                error_lexeme=opening,
            )
        return Recognition.match(end + len(closing) - start)
