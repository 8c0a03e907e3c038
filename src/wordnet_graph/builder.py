"""Graph construction from parsed WNDB entries.

Pointers name their targets by (offset, part of speech) regardless of file
order, so a target may be referenced before its own line is read. The
builder reserves a node on first reference and fills it in when the
defining line arrives; one pass over the input and one identity table are
enough.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from wordnet_graph.exceptions import IntegrityError
from wordnet_graph.models import (
    Frame,
    ParsedEntry,
    PartOfSpeech,
    SemanticRelation,
    Synset,
    SynsetKey,
    SyntacticRelation,
    Word,
)
from wordnet_graph.relations import Relation

logger = logging.getLogger(__name__)


class _WordNode:
    __slots__ = ("text", "sense", "marker", "relations")

    def __init__(self, text, sense, marker):
        self.text = text
        self.sense = sense
        self.marker = marker
        # (kind, target key, target word number)
        self.relations: list[tuple[Relation, SynsetKey, int]] = []


class _Node:
    __slots__ = (
        "key", "pos", "lex_filenum", "words", "gloss", "relations",
        "frames", "defined_at", "referenced_at", "references",
    )

    def __init__(self, key: SynsetKey, referenced_at: str) -> None:
        self.key = key
        self.pos: PartOfSpeech = key.pos
        self.lex_filenum = 0
        self.words: list[_WordNode] = []
        self.gloss = ""
        self.relations: list[tuple[Relation, SynsetKey]] = []
        self.frames: tuple[Frame, ...] = ()
        self.defined_at: str | None = None
        self.referenced_at = referenced_at
        # pointers from current definitions that name this node
        self.references = 0

    def targets(self) -> list[SynsetKey]:
        keys = [target for _, target in self.relations]
        for word in self.words:
            keys.extend(target for _, target, _ in word.relations)
        return keys


def _where(entry: ParsedEntry) -> str:
    return f"{entry.source or '<stream>'}:{entry.line}"


class GraphBuilder:
    """Accumulates parsed entries into a synset graph.

    Args:
        strict_redefinition: Reject a second defining line for the same
            synset instead of letting it replace the first.
        validate_targets: Check target word numbers of word-to-word
            relations once every synset is known.
        verify_offsets: Require each synset's offset to equal the byte
            offset of its line.
    """

    def __init__(
        self,
        *,
        strict_redefinition: bool = False,
        validate_targets: bool = True,
        verify_offsets: bool = False,
    ) -> None:
        self.strict_redefinition = strict_redefinition
        self.validate_targets = validate_targets
        self.verify_offsets = verify_offsets
        self._nodes: dict[SynsetKey, _Node] = {}
        self.entry_count = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def _resolve(self, key: SynsetKey, referenced_at: str) -> _Node:
        node = self._nodes.get(key)
        if node is None:
            node = _Node(key, referenced_at)
            self._nodes[key] = node
        return node

    def add(self, entry: ParsedEntry) -> None:
        """Fold one parsed entry into the graph."""
        where = _where(entry)
        if self.verify_offsets and entry.file_offset is not None:
            if int(entry.key.offset) != entry.file_offset:
                raise IntegrityError(
                    f"synset offset {entry.key.offset} does not match "
                    f"byte offset {entry.file_offset}",
                    source=entry.source,
                    line=entry.line,
                )

        node = self._resolve(entry.key, where)
        replaced: list[SynsetKey] = []
        if node.defined_at is not None:
            if self.strict_redefinition:
                raise IntegrityError(
                    f"synset {entry.key} already defined at {node.defined_at}",
                    source=entry.source,
                    line=entry.line,
                )
            logger.warning(
                f"Synset {entry.key} redefined at {where} "
                f"(first defined at {node.defined_at})"
            )
            replaced = node.targets()
            node.relations = []

        node.pos = entry.key.pos
        node.lex_filenum = entry.lex_filenum
        node.words = [_WordNode(w.text, w.sense, w.marker) for w in entry.words]
        node.gloss = entry.gloss
        node.frames = entry.frames
        node.defined_at = where

        for pointer in entry.pointers:
            self._resolve(pointer.target, where).references += 1
            if pointer.is_semantic:
                node.relations.append((pointer.kind, pointer.target))
                continue
            source = pointer.source
            if not 0 <= source < len(node.words):
                raise IntegrityError(
                    f"bogus source word {source + 1} in {pointer.kind.name} "
                    f"pointer (synset {entry.key} has {len(node.words)} words)",
                    source=entry.source,
                    line=entry.line,
                )
            node.words[source].relations.append(
                (pointer.kind, pointer.target, pointer.target_word)
            )
        self._release(replaced)
        self.entry_count += 1

    def _release(self, targets: list[SynsetKey]) -> None:
        """Drop references held by a replaced definition.

        A placeholder nobody points at any more is removed, so a later
        definition of it takes its arena position from that definition.
        """
        for key in targets:
            target = self._nodes.get(key)
            if target is None:
                continue
            target.references -= 1
            if target.references == 0 and target.defined_at is None:
                del self._nodes[key]
                logger.debug(f"Dropped placeholder {key} (no references left)")

    def add_all(self, entries: Iterable[ParsedEntry]) -> int:
        """Add every entry; returns how many were added."""
        count = 0
        for entry in entries:
            self.add(entry)
            count += 1
        return count

    def build(self) -> tuple[Synset, ...]:
        """Check the graph and freeze it into an arena of synsets.

        Raises:
            IntegrityError: If a synset has no words (defined with none, or
                referenced but never defined), or a relation targets a word
                number its synset does not have.
        """
        positions: dict[SynsetKey, int] = {}
        for i, (key, node) in enumerate(self._nodes.items()):
            if not node.words and node.defined_at is not None:
                raise IntegrityError(
                    f"synset {key} defined at {node.defined_at} has no words"
                )
            if not node.words:
                raise IntegrityError(
                    f"internal consistency error: synset {key} has no words "
                    f"(referenced at {node.referenced_at} but never defined)"
                )
            positions[key] = i

        if self.validate_targets:
            self._check_target_words()

        return tuple(
            Synset(
                index=positions[key],
                key=key,
                pos=node.pos,
                lex_filenum=node.lex_filenum,
                words=tuple(
                    Word(
                        text=w.text,
                        sense=w.sense,
                        marker=w.marker,
                        relations=tuple(
                            SyntacticRelation(kind, positions[target], number)
                            for kind, target, number in w.relations
                        ),
                    )
                    for w in node.words
                ),
                gloss=node.gloss,
                relations=tuple(
                    SemanticRelation(kind, positions[target])
                    for kind, target in node.relations
                ),
                frames=node.frames,
            )
            for key, node in self._nodes.items()
        )

    def _check_target_words(self) -> None:
        for key, node in self._nodes.items():
            for source, word in enumerate(node.words):
                for kind, target, number in word.relations:
                    size = len(self._nodes[target].words)
                    if not 0 <= number < size:
                        raise IntegrityError(
                            f"{kind.name} pointer from word {source + 1} of "
                            f"{key} targets word {number + 1} of {target}, "
                            f"which has {size} words (defined at "
                            f"{node.defined_at})"
                        )
