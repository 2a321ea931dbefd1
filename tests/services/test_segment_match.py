from __future__ import annotations

from ohmyglob.services.matcher import segment_match


class TestSegmentMatch:
    def test_exact(self) -> None:
        assert segment_match("what", "what")
        assert not segment_match("what", "whatx")
        assert not segment_match("what", "wha")

    def test_empty(self) -> None:
        assert segment_match("", "")
        assert not segment_match("", "a")

    def test_star_prefix_suffix_middle(self) -> None:
        assert segment_match("wh*", "what")
        assert segment_match("*at", "what")
        assert segment_match("w*t", "what")

    def test_star_matches_empty(self) -> None:
        assert segment_match("*", "")
        assert segment_match("a*", "a")
        assert segment_match("a*b", "ab")

    def test_failures(self) -> None:
        assert not segment_match("wh*", "que")
        assert not segment_match("wh*", "hut")
        assert not segment_match("*at", "where")
        assert not segment_match("w*t", "qat")
        assert not segment_match("w*t", "where")

    def test_backtracks_to_later_occurrence(self) -> None:
        assert segment_match("*ab", "aab")
        assert segment_match("a*b*c", "abxbyc")
        assert not segment_match("a*b*c", "abxbyd")

    def test_multiple_stars(self) -> None:
        assert segment_match("**", "anything")
        assert segment_match("*.tar.*", "x.tar.gz")
        assert not segment_match("*.tar.*", "x.tgz")

    def test_pathological_input_is_fast(self) -> None:
        # single resumption slot: no exponential blowup
        name = "a" * 2000
        assert not segment_match("a*a*a*a*a*a*a*b", name)
