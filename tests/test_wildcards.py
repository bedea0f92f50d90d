"""Tests for wildcard expansion."""

from scriptree.analyzers.wildcards import (
    expand_wildcards,
    get_existing_node_names,
    is_wildcard,
    match_scripts,
)


def _scripts(*names: str) -> dict[str, str]:
    return {name: f"echo {name}" for name in names}


class TestIsWildcard:
    """Tests for is_wildcard."""

    def test_star_segment(self) -> None:
        assert is_wildcard("test:*")
        assert is_wildcard("test:**")

    def test_plain_name(self) -> None:
        assert not is_wildcard("test:unit")


class TestMatchScripts:
    """Tests for segment-aware glob matching."""

    def test_single_star_matches_one_segment(self) -> None:
        """test:* matches direct children only, in map order."""
        scripts = _scripts("test:lint", "test:unit", "build", "test:unit:fast")
        assert match_scripts("test:*", scripts) == ["test:lint", "test:unit"]

    def test_double_star_matches_deeper_segments(self) -> None:
        """test:** also matches nested names."""
        scripts = _scripts("test:lint", "test:unit", "build", "test:unit:fast")
        result = match_scripts("test:**", scripts)
        assert "test:lint" in result
        assert "test:unit" in result
        assert "test:unit:fast" in result
        assert "build" not in result

    def test_partial_segment_star(self) -> None:
        """A star inside a segment matches within that segment."""
        scripts = _scripts("build:css", "build:client", "build:server")
        assert match_scripts("build:c*", scripts) == ["build:css", "build:client"]

    def test_slashes_in_names(self) -> None:
        """Slashes in script names are not treated as separators."""
        scripts = _scripts("lint:src/app", "lint:src", "lint:a:b")
        assert match_scripts("lint:*", scripts) == ["lint:src/app", "lint:src"]

    def test_prefix_must_match(self) -> None:
        """Other namespaces are not matched."""
        scripts = _scripts("testing:unit", "test:unit")
        assert match_scripts("test:*", scripts) == ["test:unit"]

    def test_double_star_needs_a_deeper_segment(self) -> None:
        """test:** does not match the bare namespace name itself."""
        scripts = _scripts("test", "test:unit", "test:unit:fast")
        assert match_scripts("test:**", scripts) == ["test:unit", "test:unit:fast"]

    def test_empty_segments_never_match(self) -> None:
        """Doubled, leading or trailing colons are not collapsed into a match."""
        scripts = _scripts("test::unit", ":test:unit", "test:", "test:unit")
        assert match_scripts("test:*", scripts) == ["test:unit"]
        assert match_scripts("*:*", scripts) == ["test:unit"]
        assert match_scripts("test:**", scripts) == ["test:unit"]


class TestExpandWildcards:
    """Tests for expand_wildcards."""

    def test_expansion_in_place(self) -> None:
        """Matches replace the pattern at its position."""
        scripts = _scripts("clean", "build:a", "build:b", "serve")
        assert expand_wildcards(["clean", "build:*", "serve"], scripts) == [
            "clean", "build:a", "build:b", "serve",
        ]

    def test_plain_names_pass_through(self) -> None:
        """Non-wildcard names are kept even when they do not exist."""
        assert expand_wildcards(["missing"], {}) == ["missing"]

    def test_no_match(self) -> None:
        """A pattern with no match expands to nothing."""
        assert expand_wildcards(["watch:*"], _scripts("build")) == []


class TestGetExistingNodeNames:
    """Tests for get_existing_node_names."""

    def test_drops_dangling(self) -> None:
        """Names without a script are dropped silently."""
        scripts = _scripts("build", "test")
        assert get_existing_node_names(["build", "nope", "test"], scripts) == ["build", "test"]

    def test_deduplicates_after_expansion(self) -> None:
        """A name reached directly and via a pattern appears once."""
        scripts = _scripts("build:a", "build:b")
        assert get_existing_node_names(["build:a", "build:*"], scripts) == ["build:a", "build:b"]
