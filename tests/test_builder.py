"""Tests for graph construction."""

import io
import logging

import pytest

from wordnet_graph import (
    GraphBuilder,
    IntegrityError,
    PartOfSpeech,
    Relation,
    SynsetKey,
    parse_line,
    parse_stream,
)


def entries(*lines):
    return [parse_line(line, i, source="data.test") for i, line in enumerate(lines, 1)]


def build(*lines, **options):
    builder = GraphBuilder(**options)
    builder.add_all(entries(*lines))
    return builder.build()


class TestPlaceholders:
    def test_forward_reference_is_filled_later(self):
        arena = build(
            "00000001 00 n 01 jab 0 001 @ 00000002 n 0000 | a punch",
            "00000002 00 n 01 punch 0 000 | a blow",
        )
        jab, punch = arena
        assert punch.words[0].text == "punch"
        assert punch.gloss == "a blow"
        assert jab.relations[0].target == punch.index

    def test_backward_reference(self):
        arena = build(
            "00000002 00 n 01 punch 0 000 | a blow",
            "00000001 00 n 01 jab 0 001 @ 00000002 n 0000 | a punch",
        )
        punch, jab = arena
        assert jab.relations[0].kind is Relation.HYPERNYM
        assert arena[jab.relations[0].target] is punch

    def test_arena_order_is_first_reference_order(self):
        arena = build(
            "00000001 00 n 01 a 0 001 @ 00000003 n 0000 | g",
            "00000002 00 n 01 b 0 000 | g",
            "00000003 00 n 01 c 0 000 | g",
        )
        assert [s.lemma for s in arena] == ["a", "c", "b"]
        assert [s.index for s in arena] == [0, 1, 2]

    def test_same_offset_different_pos_are_distinct(self):
        arena = build(
            "00000001 00 n 01 noun 0 001 = 00000001 a 0000 | g",
            "00000001 00 a 01 adj 0 001 = 00000001 n 0000 | g",
        )
        assert [s.key for s in arena] == [
            SynsetKey("00000001", PartOfSpeech.NOUN),
            SynsetKey("00000001", PartOfSpeech.ADJECTIVE),
        ]

    def test_offsets_are_opaque_strings(self):
        arena = build(
            "00000010 00 n 01 a 0 001 @ 00000010 n 0000 | g",
        )
        assert arena[0].key.offset == "00000010"
        assert arena[0].relations[0].target == 0

    def test_self_loops_allowed(self):
        arena = build("00000001 00 n 01 a 0 001 ^ 00000001 n 0000 | g")
        assert arena[0].relations[0].target == 0


class TestRelations:
    def test_syntactic_relation_attaches_to_source_word(self):
        arena = build(
            "00000001 00 a 02 good 0 full 0 001 ! 00000002 a 0201 | g",
            "00000002 00 a 01 bad 0 000 | g",
        )
        good = arena[0]
        assert good.relations == ()
        assert good.words[0].relations == ()
        rel = good.words[1].relations[0]
        assert rel.kind is Relation.ANTONYM
        assert rel.target == 1
        assert rel.word_number == 0

    def test_source_word_out_of_range(self):
        with pytest.raises(IntegrityError, match="bogus source word 2") as excinfo:
            build(
                "00000001 00 a 01 good 0 001 ! 00000002 a 0201 | g",
                "00000002 00 a 01 bad 0 000 | g",
            )
        assert excinfo.value.line == 1

    def test_zero_source_word(self):
        with pytest.raises(IntegrityError):
            build(
                "00000001 00 a 01 good 0 001 ! 00000002 a 0001 | g",
                "00000002 00 a 01 bad 0 000 | g",
            )

    def test_target_word_out_of_range(self):
        with pytest.raises(IntegrityError, match="targets word 3"):
            build(
                "00000001 00 a 01 good 0 001 ! 00000002 a 0103 | g",
                "00000002 00 a 01 bad 0 000 | g",
            )

    def test_target_word_check_can_be_disabled(self):
        arena = build(
            "00000001 00 a 01 good 0 001 ! 00000002 a 0103 | g",
            "00000002 00 a 01 bad 0 000 | g",
            validate_targets=False,
        )
        assert arena[0].words[0].relations[0].word_number == 2


class TestIntegrity:
    def test_dangling_reference(self):
        with pytest.raises(IntegrityError, match="00000009-n has no words") as excinfo:
            build("00000001 00 n 01 a 0 001 @ 00000009 n 0000 | g")
        assert "data.test:1" in str(excinfo.value)
        assert "never defined" in str(excinfo.value)

    def test_defined_without_words(self):
        with pytest.raises(
            IntegrityError, match="defined at data.test:1 has no words"
        ) as excinfo:
            build("00000001 00 n 00 000 | g")
        assert "never defined" not in str(excinfo.value)

    def test_every_synset_has_words(self, wordnet):
        assert all(lookup.synset.words for lookup in wordnet)

    def test_empty_builder(self):
        assert GraphBuilder().build() == ()


class TestRedefinition:
    LINES = (
        "00000001 00 n 01 first 0 001 @ 00000002 n 0000 | one",
        "00000002 00 n 01 target 0 000 | t",
        "00000001 00 n 01 second 0 000 | two",
    )

    def test_redefinition_replaces(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wordnet_graph.builder"):
            arena = build(*self.LINES)
        first = arena[0]
        assert first.lemma == "second"
        assert first.gloss == "two"
        assert first.relations == ()
        assert "redefined" in caplog.text

    def test_strict_redefinition(self):
        with pytest.raises(IntegrityError, match="already defined at data.test:1"):
            build(*self.LINES, strict_redefinition=True)

    def test_placeholder_fill_is_not_redefinition(self):
        arena = build(
            "00000001 00 n 01 a 0 001 @ 00000002 n 0000 | g",
            "00000002 00 n 01 b 0 000 | g",
            strict_redefinition=True,
        )
        assert len(arena) == 2

    def test_replaced_pointer_target_is_dropped(self):
        arena = build(
            "00000001 00 n 01 first 0 001 @ 00000099 n 0000 | one",
            "00000001 00 n 01 second 0 000 | two",
        )
        assert [s.lemma for s in arena] == ["second"]

    def test_target_still_referenced_elsewhere_is_kept(self):
        with pytest.raises(IntegrityError, match="00000099-n has no words"):
            build(
                "00000001 00 n 01 first 0 001 @ 00000099 n 0000 | one",
                "00000002 00 n 01 other 0 001 @ 00000099 n 0000 | g",
                "00000001 00 n 01 second 0 000 | two",
            )

    def test_replaced_word_relation_target_is_dropped(self):
        arena = build(
            "00000001 00 a 01 good 0 001 ! 00000099 a 0101 | g",
            "00000001 00 a 01 good 0 000 | g",
        )
        assert [s.key.offset for s in arena] == ["00000001"]

    def test_target_named_again_keeps_its_position(self):
        arena = build(
            "00000001 00 n 01 first 0 001 @ 00000003 n 0000 | one",
            "00000002 00 n 01 b 0 000 | g",
            "00000001 00 n 01 second 0 001 @ 00000003 n 0000 | two",
            "00000003 00 n 01 c 0 000 | g",
        )
        assert [s.lemma for s in arena] == ["second", "c", "b"]
        assert arena[0].relations[0].target == 1

    def test_dropped_target_takes_position_of_its_definition(self):
        arena = build(
            "00000001 00 n 01 first 0 001 @ 00000003 n 0000 | one",
            "00000002 00 n 01 b 0 000 | g",
            "00000001 00 n 01 second 0 000 | two",
            "00000003 00 n 01 c 0 000 | g",
        )
        assert [s.lemma for s in arena] == ["second", "b", "c"]
        assert [s.index for s in arena] == [0, 1, 2]


class TestOffsetVerification:
    def test_matching_offsets(self):
        data = (
            b"  1 header\n"
            b"00000011 00 n 01 x 0 001 @ 00000040 n 0000 | g\n"
        )
        data = data.replace(b"00000040", f"{len(data):08d}".encode())
        data += f"{len(data):08d} 00 n 01 y 0 000 | h\n".encode()

        builder = GraphBuilder(verify_offsets=True)
        builder.add_all(parse_stream(io.BytesIO(data)))
        assert [s.lemma for s in builder.build()] == ["x", "y"]

    def test_mismatched_offset(self):
        data = b"00000005 00 n 01 x 0 000 | g\n"
        builder = GraphBuilder(verify_offsets=True)
        with pytest.raises(IntegrityError, match="does not match byte offset 0"):
            builder.add_all(parse_stream(io.BytesIO(data)))
