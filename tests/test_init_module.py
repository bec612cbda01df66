"""Tests for the top-level pcomb package exports."""

import pcomb


class TestPublicAPI:
    """Top-level names."""

    def test_all_names_resolve(self):
        """Every name in __all__ is importable from the package."""
        for name in pcomb.__all__:
            assert hasattr(pcomb, name), name

    def test_combinators_exported(self):
        """All combinators and entry points are at the top level."""
        for name in (
            "literal",
            "char_class",
            "sequence",
            "repetition",
            "optional",
            "alternation",
            "reference",
            "Grammar",
            "parse",
            "parse_prefix",
        ):
            assert name in pcomb.__all__

    def test_version_is_string(self):
        """__version__ is always a non-empty string."""
        assert isinstance(pcomb.__version__, str)
        assert pcomb.__version__

    def test_top_level_round_trip(self):
        """A grammar built from top-level names parses."""
        digits = pcomb.repetition(pcomb.char_class("0-9"), 1)

        assert pcomb.parse(digits, "42") is not pcomb.NO_MATCH
        assert pcomb.parse(digits, "") is pcomb.NO_MATCH
