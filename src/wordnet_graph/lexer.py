"""Tokenizer for WNDB data lines."""

from __future__ import annotations

import string
from typing import NoReturn

from wordnet_graph.exceptions import FormatError
from wordnet_graph.models import POS_CODES, PartOfSpeech
from wordnet_graph.relations import POINTER_SYMBOLS, Relation

_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)

OFFSET_WIDTH = 8


class Lexer:
    """A cursor over one line of a data file.

    Every primitive skips leading whitespace first. A primitive that fails
    raises :class:`FormatError` and leaves the cursor just past that
    whitespace.
    """

    def __init__(
        self,
        text: str,
        *,
        source: str | None = None,
        line: int | None = None,
    ) -> None:
        self.text = text
        self.pos = 0
        self.source = source
        self.line = line

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def fail(self, message: str) -> NoReturn:
        raise FormatError(message, source=self.source, line=self.line)

    def skip_space(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos].isspace():
            self.pos += 1

    def _run(self, allowed: frozenset[str]) -> str:
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] in allowed:
            self.pos += 1
        return text[start:self.pos]

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def decimal(self) -> int:
        self.skip_space()
        digits = self._run(_DIGITS)
        if not digits:
            self.fail(f"number not found in: {self.rest!r}")
        return int(digits, 10)

    def try_decimal(self) -> int | None:
        self.skip_space()
        digits = self._run(_DIGITS)
        return int(digits, 10) if digits else None

    def hex(self) -> int:
        self.skip_space()
        digits = self._run(_HEX_DIGITS)
        if not digits:
            self.fail(f"hex number not found in: {self.rest!r}")
        return int(digits, 16)

    def word(self) -> str:
        """Read up to the next whitespace; underscores become spaces."""
        self.skip_space()
        start = self.pos
        text = self.text
        while self.pos < len(text) and not text[self.pos].isspace():
            self.pos += 1
        return text[start:self.pos].replace("_", " ")

    def offset(self) -> str:
        self.skip_space()
        candidate = self.text[self.pos:self.pos + OFFSET_WIDTH]
        if len(candidate) < OFFSET_WIDTH:
            self.fail("invalid offset")
        if not all(c in _DIGITS for c in candidate):
            self.fail(f"invalid chars in offset: {candidate!r}")
        self.pos += OFFSET_WIDTH
        return candidate

    def part_of_speech(self) -> PartOfSpeech:
        self.skip_space()
        if self.at_end():
            self.fail("unexpected end of input, part of speech expected")
        code = self.text[self.pos]
        pos = POS_CODES.get(code)
        if pos is None:
            self.fail(f"invalid part of speech: {code!r}")
        self.pos += 1
        return pos

    def relation(self) -> Relation:
        self.skip_space()
        start = self.pos
        symbol = self.word()
        kind = POINTER_SYMBOLS.get(symbol)
        if kind is None:
            self.pos = start
            self.fail(f"unrecognized pointer type: {symbol!r}")
        return kind

    def expect(self, char: str) -> None:
        self.skip_space()
        if self.at_end() or self.text[self.pos] != char:
            found = "end of line" if self.at_end() else repr(self.text[self.pos])
            self.fail(f"expected {char!r}, got {found}")
        self.pos += 1

    def gloss(self) -> str:
        """Read the ``|`` delimiter and return the rest of the line, stripped."""
        self.skip_space()
        if self.at_end():
            self.fail("definition expected")
        if self.text[self.pos] != "|":
            self.fail(
                f"definition expected (want '|' got {self.text[self.pos]!r})"
            )
        gloss = self.text[self.pos + 1:].strip()
        self.pos = len(self.text)
        return gloss
