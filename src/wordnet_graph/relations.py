"""Relation kinds, WNDB pointer symbols and WN-LMF names for wordnet-graph."""

from __future__ import annotations

import re
from enum import IntFlag

from wn.constants import REVERSE_RELATIONS

from wordnet_graph.exceptions import QueryError


class Relation(IntFlag):
    """The ways in which synsets (or words in them) may be related.

    Every kind is a single bit, so a union of kinds is tested against a
    relation with one ``&``.
    """

    ALSO_SEE = 1 << 0
    # A word with an opposite meaning
    ANTONYM = 1 << 1
    # A noun for which adjectives express values ("weight" -> "light", "heavy")
    ATTRIBUTE = 1 << 2
    CAUSE = 1 << 3
    # Terms in different syntactic categories sharing a root form
    DERIVATIONALLY_RELATED_FORM = 1 << 4
    # Adverbs point at the adjective they are derived from
    DERIVED_FROM_ADJECTIVE = 1 << 5
    IN_DOMAIN_REGION = 1 << 6
    IN_DOMAIN_TOPIC = 1 << 7
    IN_DOMAIN_USAGE = 1 << 8
    CONTAINS_DOMAIN_REGION = 1 << 9
    CONTAINS_DOMAIN_TOPIC = 1 << 10
    CONTAINS_DOMAIN_USAGE = 1 << 11
    ENTAILMENT = 1 << 12
    # Y is a hypernym of X if X is a (kind of) Y
    HYPERNYM = 1 << 13
    INSTANCE_HYPERNYM = 1 << 14
    INSTANCE_HYPONYM = 1 << 15
    # X is a hyponym of Y if X is a (kind of) Y
    HYPONYM = 1 << 16
    MEMBER_MERONYM = 1 << 17
    PART_MERONYM = 1 << 18
    SUBSTANCE_MERONYM = 1 << 19
    MEMBER_HOLONYM = 1 << 20
    PART_HOLONYM = 1 << 21
    SUBSTANCE_HOLONYM = 1 << 22
    PARTICIPLE_OF_VERB = 1 << 23
    RELATED_FORM = 1 << 24
    SIMILAR_TO = 1 << 25
    VERB_GROUP = 1 << 26

    # Adjectives pointing at the noun they pertain to share the adverb bit.
    PERTAINYM = DERIVED_FROM_ADJECTIVE

    @property
    def lmf_name(self) -> str | None:
        """The WN-LMF relation name for a single kind, if it has one."""
        return _LMF_NAMES.get(self)

    @property
    def inverse(self) -> Relation | None:
        """The kind pointing back the other way, or None if there is none."""
        name = _LMF_NAMES.get(self)
        if name is None:
            return None
        reverse = REVERSE_RELATIONS.get(name)
        if reverse is None:
            return None
        if reverse == name:
            return self
        return _BY_LMF_NAME.get(reverse)

    @classmethod
    def from_symbol(cls, symbol: str) -> Relation | None:
        """Look up a WNDB pointer symbol (``@``, ``~i``, ``%m`` ...)."""
        return POINTER_SYMBOLS.get(symbol)

    @classmethod
    def from_names(cls, names: str) -> Relation:
        """Build a mask from comma or space separated names.

        Accepts member names in any case (``hypernym``, ``ALSO_SEE``) and
        WN-LMF names (``holo_member``, ``domain_topic``).
        """
        mask = cls(0)
        for name in re.split(r"[\s,|]+", names.strip()):
            if not name:
                continue
            member = cls.__members__.get(name.upper().replace("-", "_"))
            if member is None:
                member = _BY_LMF_NAME.get(name.lower())
            if member is None:
                raise QueryError(f"Unknown relation kind: {name!r}")
            mask |= member
        return mask


# WNDB pointer_symbol -> relation kind.
POINTER_SYMBOLS: dict[str, Relation] = {
    "!": Relation.ANTONYM,
    "#m": Relation.MEMBER_HOLONYM,
    "#p": Relation.PART_HOLONYM,
    "#s": Relation.SUBSTANCE_HOLONYM,
    "$": Relation.VERB_GROUP,
    "%m": Relation.MEMBER_MERONYM,
    "%p": Relation.PART_MERONYM,
    "%s": Relation.SUBSTANCE_MERONYM,
    "&": Relation.SIMILAR_TO,
    "*": Relation.ENTAILMENT,
    "+": Relation.DERIVATIONALLY_RELATED_FORM,
    "-c": Relation.IN_DOMAIN_TOPIC,
    "-r": Relation.IN_DOMAIN_REGION,
    "-u": Relation.IN_DOMAIN_USAGE,
    ";c": Relation.CONTAINS_DOMAIN_TOPIC,
    ";r": Relation.CONTAINS_DOMAIN_REGION,
    ";u": Relation.CONTAINS_DOMAIN_USAGE,
    "<": Relation.PARTICIPLE_OF_VERB,
    "=": Relation.ATTRIBUTE,
    ">": Relation.CAUSE,
    "@": Relation.HYPERNYM,
    "@i": Relation.INSTANCE_HYPERNYM,
    "\\": Relation.PERTAINYM,
    "^": Relation.ALSO_SEE,
    "~": Relation.HYPONYM,
    "~i": Relation.INSTANCE_HYPONYM,
}

# Relation kind -> WN-LMF relation name, as used by wn.constants.
_LMF_NAMES: dict[Relation, str] = {
    Relation.ALSO_SEE: "also",
    Relation.ANTONYM: "antonym",
    Relation.ATTRIBUTE: "attribute",
    Relation.CAUSE: "causes",
    Relation.DERIVATIONALLY_RELATED_FORM: "derivation",
    Relation.PERTAINYM: "pertainym",
    Relation.IN_DOMAIN_REGION: "domain_region",
    Relation.IN_DOMAIN_TOPIC: "domain_topic",
    Relation.IN_DOMAIN_USAGE: "exemplifies",
    Relation.CONTAINS_DOMAIN_REGION: "has_domain_region",
    Relation.CONTAINS_DOMAIN_TOPIC: "has_domain_topic",
    Relation.CONTAINS_DOMAIN_USAGE: "is_exemplified_by",
    Relation.ENTAILMENT: "entails",
    Relation.HYPERNYM: "hypernym",
    Relation.INSTANCE_HYPERNYM: "instance_hypernym",
    Relation.INSTANCE_HYPONYM: "instance_hyponym",
    Relation.HYPONYM: "hyponym",
    Relation.MEMBER_MERONYM: "mero_member",
    Relation.PART_MERONYM: "mero_part",
    Relation.SUBSTANCE_MERONYM: "mero_substance",
    Relation.MEMBER_HOLONYM: "holo_member",
    Relation.PART_HOLONYM: "holo_part",
    Relation.SUBSTANCE_HOLONYM: "holo_substance",
    Relation.PARTICIPLE_OF_VERB: "participle",
    Relation.SIMILAR_TO: "similar",
    Relation.VERB_GROUP: "similar",
}

# First kind wins: "similar" resolves to SIMILAR_TO, not VERB_GROUP.
_BY_LMF_NAME: dict[str, Relation] = {}
for _kind, _name in _LMF_NAMES.items():
    _BY_LMF_NAME.setdefault(_name, _kind)
del _kind, _name
