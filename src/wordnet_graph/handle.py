"""Wordnet — the read-only, in-memory WordNet handle.

A handle is built once by a single load and never changes afterwards; it
may be shared by any number of threads without locking.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, BinaryIO

from wordnet_graph.exceptions import IntegrityError, QueryError
from wordnet_graph.index import build_lemma_index, normalize
from wordnet_graph.models import POS_CODES, PartOfSpeech, Synset, SynsetKey
from wordnet_graph.relations import Relation

if TYPE_CHECKING:
    from wordnet_graph.config import LoaderConfig

PosFilter = PartOfSpeech | str | Iterable[PartOfSpeech | str] | None

_POS_BY_LABEL = {p.label: p for p in PartOfSpeech}


def _coerce_pos(value: PartOfSpeech | str) -> PartOfSpeech:
    if isinstance(value, PartOfSpeech):
        return value
    pos = POS_CODES.get(value) or _POS_BY_LABEL.get(value.lower())
    if pos is None:
        raise QueryError(f"Unknown part of speech: {value!r}")
    return pos


def pos_filter(pos: PosFilter) -> frozenset[PartOfSpeech] | None:
    """Normalize a part-of-speech filter; None or empty means "any"."""
    if pos is None:
        return None
    if isinstance(pos, str):
        pos = [pos]
    wanted = frozenset(_coerce_pos(p) for p in pos)
    return wanted or None


@dataclass(frozen=True)
class Lookup:
    """The result of a search: one synset, seen through one of its words."""

    word: str
    synset: Synset
    arena: Sequence[Synset] = field(repr=False, compare=False)

    def __str__(self) -> str:
        return f"{self.word!r} ({self.synset.pos.label})"

    @property
    def lemma(self) -> str:
        """A canonical synonym for this word (the synset's first word)."""
        return self.synset.lemma

    @property
    def pos(self) -> PartOfSpeech:
        return self.synset.pos

    @property
    def key(self) -> SynsetKey:
        return self.synset.key

    @property
    def gloss(self) -> str:
        return self.synset.gloss

    @property
    def synonyms(self) -> list[str]:
        return [w.text for w in self.synset.words]

    def related(self, kinds: Relation | int) -> list[Lookup]:
        """Get synsets related to this one.

        Synset-level relations whose kind is in ``kinds`` are always
        followed. Word-level relations are followed only when they start at
        the word this result was found through.

        Args:
            kinds: A bitwise union of relation kinds to include.
        """
        mask = int(kinds)
        found = []
        for rel in self.synset.relations:
            if rel.kind & mask:
                target = self.arena[rel.target]
                found.append(Lookup(target.lemma, target, self.arena))

        key = normalize(self.word)
        for word in self.synset.words:
            if normalize(word.text) != key:
                continue
            for rel in word.relations:
                if not rel.kind & mask:
                    continue
                target = self.arena[rel.target]
                if not 0 <= rel.word_number < len(target.words):
                    raise IntegrityError(
                        f"{rel.kind.name} relation from {self.synset.key} "
                        f"targets word {rel.word_number + 1} of {target.key}, "
                        f"which has {len(target.words)} words"
                    )
                found.append(
                    Lookup(target.words[rel.word_number].text, target, self.arena)
                )
        return found

    def dump_str(self) -> str:
        lines = [
            f"Word: {self}",
            "Synonyms: " + ", ".join(self.synonyms),
            f"{len(self.synset.relations)} semantic relationships",
            "| " + self.gloss,
        ]
        return "\n".join(lines) + "\n"


class Wordnet:
    """An in-memory WordNet database.

    Build one with :func:`wordnet_graph.load`, :meth:`from_directory` or
    :meth:`from_streams`.
    """

    def __init__(self, synsets: Sequence[Synset]) -> None:
        self._synsets = tuple(synsets)
        self._by_key = MappingProxyType({s.key: s for s in self._synsets})
        self._index = build_lemma_index(self._synsets)

    @classmethod
    def from_directory(
        cls, path: str | Path, config: LoaderConfig | None = None
    ) -> Wordnet:
        """Load every data file under ``path``."""
        from wordnet_graph.loader import load

        return load(path, config)

    @classmethod
    def from_streams(
        cls,
        streams: Iterable[tuple[str, BinaryIO]],
        config: LoaderConfig | None = None,
    ) -> Wordnet:
        """Load ``(name, binary stream)`` pairs, in order."""
        from wordnet_graph.loader import load_streams

        return load_streams(streams, config)

    def __len__(self) -> int:
        return len(self._synsets)

    def __iter__(self) -> Iterator[Lookup]:
        return self.synsets()

    def __repr__(self) -> str:
        return f"<Wordnet synsets={len(self._synsets)} lemmas={len(self._index)}>"

    @property
    def lemma_count(self) -> int:
        return len(self._index)

    def counts(self) -> dict[PartOfSpeech, int]:
        """Number of synsets per part of speech."""
        counts = {pos: 0 for pos in PartOfSpeech}
        for synset in self._synsets:
            counts[synset.pos] += 1
        return counts

    def get(self, offset: str, pos: PartOfSpeech | str) -> Lookup | None:
        """Fetch a synset by its identity key."""
        synset = self._by_key.get(SynsetKey(offset, _coerce_pos(pos)))
        if synset is None:
            return None
        return Lookup(synset.lemma, synset, self._synsets)

    def lookup(self, text: str, pos: PosFilter = None) -> list[Lookup]:
        """Look up synsets containing ``text``.

        Matching is case-insensitive and ignores extra whitespace. Each
        result keeps ``text`` exactly as given.

        Raises:
            QueryError: If ``text`` is empty or ``pos`` names an unknown
                part of speech.
        """
        if not text:
            raise QueryError("empty string passed as criteria to lookup")
        wanted = pos_filter(pos)
        found = []
        for i in self._index.get(normalize(text), ()):
            synset = self._synsets[i]
            if wanted is not None and synset.pos not in wanted:
                continue
            found.append(Lookup(text, synset, self._synsets))
        return found

    def synsets(self, pos: PosFilter = None) -> Iterator[Lookup]:
        """Yield every synset in load order, seen through its first word."""
        wanted = pos_filter(pos)
        for synset in self._synsets:
            if wanted is not None and synset.pos not in wanted:
                continue
            yield Lookup(synset.lemma, synset, self._synsets)

    def iterate(self, pos: PosFilter, visitor: Callable[[Lookup], Any]) -> None:
        """Call ``visitor`` for every synset matching ``pos``.

        An exception raised by ``visitor`` stops the iteration and
        propagates to the caller.
        """
        for result in self.synsets(pos):
            visitor(result)
