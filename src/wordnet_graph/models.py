"""Domain model dataclasses and enums for wordnet-graph."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from wordnet_graph.relations import Relation

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PartOfSpeech(str, Enum):
    """Part-of-speech tags for synsets.

    WNDB satellite adjectives (``s``) are folded into ``ADJECTIVE``; a
    satellite is recognisable only by its ``SIMILAR_TO`` pointer to the
    head adjective of its cluster.
    """

    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADVERB = "r"

    @property
    def label(self) -> str:
        return _POS_LABELS[self]


_POS_LABELS = {
    PartOfSpeech.NOUN: "noun",
    PartOfSpeech.VERB: "verb",
    PartOfSpeech.ADJECTIVE: "adj",
    PartOfSpeech.ADVERB: "adv",
}

# WNDB ss_type codes, including the satellite code.
POS_CODES: dict[str, PartOfSpeech] = {
    "n": PartOfSpeech.NOUN,
    "v": PartOfSpeech.VERB,
    "a": PartOfSpeech.ADJECTIVE,
    "s": PartOfSpeech.ADJECTIVE,
    "r": PartOfSpeech.ADVERB,
}


class AdjPosition(str, Enum):
    """Syntactic position of an adjective relative to a noun."""

    ATTRIBUTIVE = "a"
    IMMEDIATE_POSTNOMINAL = "ip"
    PREDICATIVE = "p"


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

class SynsetKey(NamedTuple):
    """Identity of a synset: its 8-digit byte offset and part of speech.

    The offset is kept verbatim, leading zeros included.
    """

    offset: str
    pos: PartOfSpeech

    def __str__(self) -> str:
        return f"{self.offset}-{self.pos.value}"


# ---------------------------------------------------------------------------
# Parsed records (one per data line)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedWord:
    """A word as it appears in a data line."""

    text: str
    sense: int
    marker: AdjPosition | None = None


@dataclass(frozen=True, slots=True)
class ParsedPointer:
    """An outgoing pointer of a data line.

    ``source`` and ``target_word`` are 0-based word numbers and are only
    set for syntactic (word to word) pointers.
    """

    kind: Relation
    target: SynsetKey
    source: int | None = None
    target_word: int | None = None

    @property
    def is_semantic(self) -> bool:
        return self.source is None


@dataclass(frozen=True, slots=True)
class Frame:
    """A verb frame; ``word_number`` 0 applies the frame to every word."""

    number: int
    word_number: int


@dataclass(frozen=True, slots=True)
class ParsedEntry:
    """One synset definition read from a data line."""

    key: SynsetKey
    lex_filenum: int
    words: tuple[ParsedWord, ...]
    pointers: tuple[ParsedPointer, ...]
    frames: tuple[Frame, ...]
    gloss: str
    source: str | None = None
    line: int | None = None
    file_offset: int | None = None


# ---------------------------------------------------------------------------
# Graph nodes (immutable, owned by the handle's arena)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SemanticRelation:
    """A relation between two whole synsets."""

    kind: Relation
    target: int


@dataclass(frozen=True, slots=True)
class SyntacticRelation:
    """A relation between a word and one word of another synset."""

    kind: Relation
    target: int
    word_number: int


@dataclass(frozen=True, slots=True)
class Word:
    """A member word of a synset."""

    text: str
    sense: int
    marker: AdjPosition | None
    relations: tuple[SyntacticRelation, ...]


@dataclass(frozen=True, slots=True, eq=False)
class Synset:
    """A set of words sharing one sense.

    ``index`` is the synset's position in the arena; relation targets are
    arena indices.
    """

    index: int
    key: SynsetKey
    pos: PartOfSpeech
    lex_filenum: int
    words: tuple[Word, ...]
    gloss: str
    relations: tuple[SemanticRelation, ...]
    frames: tuple[Frame, ...]

    @property
    def lemma(self) -> str:
        return self.words[0].text
