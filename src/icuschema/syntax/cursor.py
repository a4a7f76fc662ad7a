"""Position-carrying cursor used by every scanner in icuschema.syntax.

A Cursor is a (text, offset) pair that is never modified in place: moving
produces a new Cursor. Scanners therefore return their end position
explicitly, packed with the scanned value in a ParseResult, and a caller
that rejects a result simply keeps its old cursor.

Python 3.13+.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Read position inside sanitized template text.

    Example:
        >>> start = Cursor("{n}", 0)
        >>> start.current, start.advance().current
        ('{', 'n')
        >>> start.pos  # moving never touches the original
        0
        >>> Cursor("{n}", 3).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: When called at end of input; check is_eof first.
        """
        if self.is_eof:
            msg = f"No character at position {self.pos}: end of input"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """Unconsumed text."""
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Character `offset` places from the cursor, or None outside the text.

        Negative offsets look back: the tag scanner uses peek(-1) to spot
        the "/" of a self-closing tag.
        """
        index = self.pos + offset
        return self.source[index] if 0 <= index < len(self.source) else None

    def advance(self, count: int = 1) -> "Cursor":
        """Cursor moved forward by count characters, stopping at the end."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Text between this cursor and end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def starts_with(self, prefix: str) -> bool:
        """Whether the unconsumed text begins with prefix."""
        return self.source.startswith(prefix, self.pos)

    def expect(self, char: str) -> "Cursor | None":
        """Step over char if it is the current character.

        Example:
            >>> Cursor("{a}", 0).expect("{").pos
            1
            >>> Cursor("a}", 0).expect("{") is None
            True
        """
        if self.starts_with(char):
            return self.advance(len(char))
        return None

    def seek(self, char: str) -> "Cursor | None":
        """Cursor on the next occurrence of char at or after this position.

        Example:
            >>> Cursor("ab{c}", 0).seek("{").pos
            2
            >>> Cursor("abc", 0).seek("{") is None
            True
        """
        index = self.source.find(char, self.pos)
        return None if index < 0 else Cursor(self.source, index)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """A scanned value plus the cursor just past it.

    Scanners share one shape:

        def parse_thing(cursor: Cursor) -> ParseResult[Thing] | None

    where None means "nothing of that kind starts here".

    Type Parameters:
        T: Type of the scanned value

    Example:
        >>> result = ParseResult("=0", Cursor("=0{none}", 2))
        >>> result.value, result.cursor.current
        ('=0', '{')
    """

    value: T
    cursor: Cursor
