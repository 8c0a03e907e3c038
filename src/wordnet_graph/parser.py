"""Record grammar for WNDB data lines.

A data line reads::

    offset lex_filenum ss_type w_cnt {word lex_id}... p_cnt
        {pointer_symbol offset pos source/target}...
        [f_cnt {+ f_num w_num}...] | gloss

Lines of the license header start with their own line number instead of
an offset and produce no entry.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import BinaryIO, TypeVar

from wordnet_graph.exceptions import FormatError
from wordnet_graph.lexer import Lexer
from wordnet_graph.models import (
    AdjPosition,
    Frame,
    ParsedEntry,
    ParsedPointer,
    ParsedWord,
    PartOfSpeech,
    SynsetKey,
)
from wordnet_graph.reader import iter_records

_T = TypeVar("_T")

# Adjective words may carry a syntactic marker: "galore(ip)", "aghast(p)".
_ADJ_MARKER = re.compile(r"^(?P<word>.+)\((?P<marker>a|ip|p)\)$")


def _field(what: str, read: Callable[[], _T]) -> _T:
    """Run one lexer primitive, naming the field in any error."""
    try:
        return read()
    except FormatError as e:
        raise FormatError(
            f"{what} expected: {e.message}", source=e.source, line=e.line
        ) from None


def _split_marker(text: str) -> tuple[str, AdjPosition | None]:
    m = _ADJ_MARKER.match(text)
    if m is None:
        return text, None
    return m.group("word"), AdjPosition(m.group("marker"))


def _decode(data: bytes | str, source: str | None, line: int) -> str:
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(
            f"invalid UTF-8 data: {e}", source=source, line=line
        ) from e


def parse_line(
    data: bytes | str,
    line: int,
    *,
    source: str | None = None,
    file_offset: int | None = None,
) -> ParsedEntry | None:
    """Parse one data line.

    Args:
        data: The line, without its newline.
        line: 1-based line number, used to recognise header lines.
        source: File name for error messages.
        file_offset: Byte offset of the line in its file, if known.

    Returns:
        The parsed entry, or None for a header line.

    Raises:
        FormatError: If any field is missing or malformed.
    """
    lexer = Lexer(_decode(data, source, line), source=source, line=line)

    try:
        offset = lexer.offset()
    except FormatError:
        if lexer.try_decimal() == line:
            return None
        lexer.fail("can't parse line, expected comment or offset")

    lex_filenum = _field("file number", lexer.decimal)
    pos = _field("part of speech", lexer.part_of_speech)
    word_count = _field("word count", lexer.hex)

    words = []
    for _ in range(word_count):
        text = lexer.word()
        if not text:
            lexer.fail(f"word expected ({len(words)} of {word_count} read)")
        sense = _field(f"sense id for {text!r}", lexer.hex)
        marker = None
        if pos is PartOfSpeech.ADJECTIVE:
            text, marker = _split_marker(text)
        words.append(ParsedWord(text=text, sense=sense, marker=marker))

    pointer_count = _field("pointer count", lexer.decimal)
    pointers = []
    for _ in range(pointer_count):
        kind = lexer.relation()
        target_offset = _field("pointer offset", lexer.offset)
        target_pos = _field("pointer part of speech", lexer.part_of_speech)
        nature = _field("pointer source/target", lexer.hex)
        target = SynsetKey(target_offset, target_pos)
        if nature == 0:
            pointers.append(ParsedPointer(kind=kind, target=target))
        else:
            pointers.append(
                ParsedPointer(
                    kind=kind,
                    target=target,
                    source=(nature >> 8) - 1,
                    target_word=(nature & 0xFF) - 1,
                )
            )

    frames = []
    frame_count = lexer.try_decimal()
    if frame_count is not None:
        for _ in range(frame_count):
            _field("frame marker", lambda: lexer.expect("+"))
            number = _field("frame number", lexer.decimal)
            word_number = _field("frame word number", lexer.hex)
            frames.append(Frame(number=number, word_number=word_number))

    gloss = lexer.gloss()

    return ParsedEntry(
        key=SynsetKey(offset, pos),
        lex_filenum=lex_filenum,
        words=tuple(words),
        pointers=tuple(pointers),
        frames=tuple(frames),
        gloss=gloss,
        source=source,
        line=line,
        file_offset=file_offset,
    )


def parse_stream(
    stream: BinaryIO, source: str | None = None
) -> Iterator[ParsedEntry]:
    """Parse every line of a binary stream, skipping header lines."""
    for number, offset, data in iter_records(stream):
        entry = parse_line(data, number, source=source, file_offset=offset)
        if entry is not None:
            yield entry
