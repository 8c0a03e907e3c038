"""Lemma normalization and the word -> synsets index."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from wordnet_graph.models import Synset


def normalize(text: str) -> str:
    """Canonical lookup key: case-folded, whitespace runs collapsed."""
    return " ".join(text.split()).casefold()


def build_lemma_index(synsets: Sequence[Synset]) -> Mapping[str, tuple[int, ...]]:
    """Map every normalized member word to the arena indices of its synsets.

    A synset listed under a key appears there once, even when two of its
    words normalize alike.
    """
    buckets: dict[str, list[int]] = {}
    for synset in synsets:
        for word in synset.words:
            bucket = buckets.setdefault(normalize(word.text), [])
            if not bucket or bucket[-1] != synset.index:
                bucket.append(synset.index)
    return MappingProxyType({k: tuple(v) for k, v in buckets.items()})
