# SPDX-License-Identifier: MIT
"""Property-based tests for decomposition and ordering.

These tests verify that:
- Decomposition loses nothing before the build metadata separator
- Adjacent components always alternate between numeric and non-numeric
- The ordering is reflexive, antisymmetric and total over arbitrary text
- Sorting well-formed versions yields a consistent order
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from flexver import (
    ComponentKind,
    FlexVersion,
    compare,
    decompose,
    strip_build_metadata,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

# Arbitrary text, including characters outside the BMP and unpaired
# surrogates (st.text leaves category Cs out)
any_text = st.lists(
    st.one_of(st.characters(), st.integers(0xD800, 0xDFFF).map(chr)),
    max_size=30,
).map("".join)

# Numeric parts, sometimes zero-padded
numeric_parts = st.from_regex(r"[0-9]{1,4}", fullmatch=True)

# Separators and tags that sort after "-"
literal_parts = st.sampled_from([".", "_", "a", "b", "rc", "pre", "x"])

# SemVer style pre-release tags ("-beta", "-rc.")
prerelease_tags = st.from_regex(r"-[a-z]{1,6}\.?", fullmatch=True)

# Build metadata suffixes
build_suffixes = st.one_of(st.just(""), st.text(max_size=8).map(lambda s: "+" + s))


@st.composite
def well_formed_versions(draw):
    """Generate version strings of the shapes seen in the wild.

    A lone "-" is never produced: it compares above a missing component but
    below any pre-release tag, and mixing it in breaks transitivity.
    """
    parts = draw(st.lists(st.one_of(numeric_parts, literal_parts), min_size=1, max_size=6))
    version = "".join(parts)
    if draw(st.booleans()):
        version += draw(prerelease_tags)
        version += draw(st.one_of(st.just(""), numeric_parts))
    return version + draw(build_suffixes)


# =============================================================================
# Decomposition properties
# =============================================================================


class TestDecomposeProperties:
    """Property-based tests for decompose."""

    @given(version=any_text)
    @settings(max_examples=200)
    def test_concatenation_reproduces_input_before_plus(self, version: str):
        """
        *For any* string, joining the component texts SHALL give back the
        string up to its first "+".
        """
        joined = "".join(c.text for c in decompose(version))
        assert joined == strip_build_metadata(version)

    @given(version=any_text)
    @settings(max_examples=200)
    def test_non_empty_input_has_components(self, version: str):
        assert bool(decompose(version)) == bool(version)

    @given(version=any_text.map(lambda s: "+" + s))
    @settings(max_examples=50)
    def test_bare_build_metadata_beats_empty(self, version: str):
        assert compare(version, "") == 1

    @given(version=any_text)
    @settings(max_examples=200)
    def test_adjacent_components_alternate(self, version: str):
        components = decompose(version)
        for left, right in zip(components, components[1:]):
            assert left.is_numeric != right.is_numeric

    @given(version=any_text)
    @settings(max_examples=200)
    def test_component_kind_invariants(self, version: str):
        components = decompose(version)
        if version and not strip_build_metadata(version):
            assert [c.text for c in components] == [""]
            assert components[0].kind is ComponentKind.LITERAL
            return

        for component in components:
            assert component.text
            assert component.kind is not ComponentKind.NULL
            if component.kind is ComponentKind.NUMERIC:
                assert all("0" <= char <= "9" for char in component.text)
            elif component.kind is ComponentKind.PRERELEASE:
                assert component.text[0] == "-"
                assert len(component.text) > 1
            else:
                assert not any("0" <= char <= "9" for char in component.text)
                assert not (component.text[0] == "-" and len(component.text) > 1)


# =============================================================================
# Ordering properties
# =============================================================================


class TestOrderingProperties:
    """Property-based tests for compare."""

    @given(version=any_text)
    @settings(max_examples=200)
    def test_reflexive(self, version: str):
        assert compare(version, version) == 0

    @given(a=any_text, b=any_text)
    @settings(max_examples=300)
    def test_antisymmetric(self, a: str, b: str):
        """
        *For any* two strings, swapping the arguments SHALL negate the result.
        """
        assert compare(a, b) == -compare(b, a)

    @given(a=any_text, b=any_text)
    @settings(max_examples=300)
    def test_total(self, a: str, b: str):
        assert compare(a, b) in (-1, 0, 1)

    @given(a=any_text, b=any_text)
    @settings(max_examples=200)
    def test_equal_versions_hash_equal(self, a: str, b: str):
        if compare(a, b) == 0:
            assert hash(FlexVersion(a)) == hash(FlexVersion(b))

    @given(version=well_formed_versions())
    @settings(max_examples=100)
    def test_padding_with_zeroes_is_equal(self, version: str):
        padded = "".join(
            "0" + c.text if c.kind is ComponentKind.NUMERIC else c.text
            for c in decompose(version)
        )
        assert compare(version, padded) == 0

    @given(versions=st.lists(well_formed_versions(), min_size=2, max_size=8))
    @settings(max_examples=200)
    def test_sorted_order_is_consistent(self, versions: list[str]):
        """
        *For any* list of well-formed versions, every earlier element of the
        sorted list SHALL compare less than or equal to every later one.
        """
        ordered = sorted(versions, key=version_key)
        for i, earlier in enumerate(ordered):
            for later in ordered[i + 1 :]:
                assert compare(earlier, later) <= 0

    @given(a=well_formed_versions(), b=well_formed_versions(), c=well_formed_versions())
    @settings(max_examples=200)
    def test_transitive(self, a: str, b: str, c: str):
        if compare(a, b) <= 0 and compare(b, c) <= 0:
            assert compare(a, c) <= 0

    @given(version=well_formed_versions())
    @settings(max_examples=100)
    def test_prerelease_sorts_before_release(self, version: str):
        release = strip_build_metadata(version) + "1"
        assert compare(release + "-beta", release) < 0
