# SPDX-License-Identifier: MIT
"""FlexVer ordering of free-form version strings.

Versions are compared component by component (see ``flexver.components``).
When one version runs out of components, the missing positions compare as
``NULL``:

- a numeric or literal component is greater than ``NULL`` ("1.0" > "1")
- a pre-release component is less than ``NULL`` ("1.0.0-beta" < "1.0.0")

Build metadata (anything after "+") is ignored. Comparing versions of
unrelated shapes gives a defined but not necessarily meaningful order.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Callable, Union

from .components import NULL, ComponentKind, VersionComponent, decompose

Rule = Callable[[VersionComponent, VersionComponent], int]


def _always_greater(a: VersionComponent, b: VersionComponent) -> int:
    return 1


def _always_less(a: VersionComponent, b: VersionComponent) -> int:
    return -1


def _always_equal(a: VersionComponent, b: VersionComponent) -> int:
    return 0


def _compare_codepoints(a: VersionComponent, b: VersionComponent) -> int:
    """Compare two components code point by code point.

    The first differing code point decides; otherwise the longer one wins.
    """
    for char_a, char_b in zip(a.text, b.text):
        if char_a != char_b:
            return ord(char_a) - ord(char_b)
    return len(a.text) - len(b.text)


def _significant_digits(digits: str) -> str:
    # An all-zero run keeps a single "0"
    return digits.lstrip("0") or "0"


def _compare_numeric(a: VersionComponent, b: VersionComponent) -> int:
    """Compare two digit runs by magnitude without converting to int.

    "10" > "9" and "002" == "2". Digit runs of any length are supported.
    """
    digits_a = _significant_digits(a.text)
    digits_b = _significant_digits(b.text)
    if len(digits_a) != len(digits_b):
        return -1 if len(digits_a) < len(digits_b) else 1
    for digit_a, digit_b in zip(digits_a, digits_b):
        if digit_a != digit_b:
            return ord(digit_a) - ord(digit_b)
    return 0


_NUMERIC = ComponentKind.NUMERIC
_LITERAL = ComponentKind.LITERAL
_PRERELEASE = ComponentKind.PRERELEASE
_NULL = ComponentKind.NULL

# Every (left, right) pair of kinds has exactly one rule, and the rule for
# (right, left) is its negation.
_RULES: dict[tuple[ComponentKind, ComponentKind], Rule] = {
    (_NULL, _NULL): _always_equal,
    (_NUMERIC, _NULL): _always_greater,
    (_NULL, _NUMERIC): _always_less,
    (_LITERAL, _NULL): _always_greater,
    (_NULL, _LITERAL): _always_less,
    # A pre-release tag sorts before the release that has no tag there
    (_PRERELEASE, _NULL): _always_less,
    (_NULL, _PRERELEASE): _always_greater,
    (_NUMERIC, _NUMERIC): _compare_numeric,
    (_LITERAL, _LITERAL): _compare_codepoints,
    (_LITERAL, _PRERELEASE): _compare_codepoints,
    (_PRERELEASE, _LITERAL): _compare_codepoints,
    (_PRERELEASE, _PRERELEASE): _compare_codepoints,
    # Mismatched shapes fall back to plain text order
    (_NUMERIC, _LITERAL): _compare_codepoints,
    (_LITERAL, _NUMERIC): _compare_codepoints,
    (_NUMERIC, _PRERELEASE): _compare_codepoints,
    (_PRERELEASE, _NUMERIC): _compare_codepoints,
}


def compare_components(a: VersionComponent, b: VersionComponent) -> int:
    """Compare two version components.

    Returns:
        A negative number if a < b, zero if equal, a positive number if a > b.
        Only the sign is meaningful.

    Examples:
        >>> from flexver.components import VersionComponent, ComponentKind, NULL
        >>> compare_components(VersionComponent(ComponentKind.NUMERIC, "10"),
        ...                    VersionComponent(ComponentKind.NUMERIC, "9"))
        1
        >>> compare_components(VersionComponent(ComponentKind.PRERELEASE, "-rc"), NULL)
        -1
    """
    return _RULES[(a.kind, b.kind)](a, b)


@dataclass(frozen=True, slots=True, eq=False)
class FlexVersion:
    """A version string that orders itself with FlexVer.

    Equality is FlexVer equality, so ``FlexVersion("1.0") == FlexVersion("1.00")``
    even though the raw strings differ. Components are decomposed on demand.

    Attributes:
        raw: The version string exactly as given
    """

    raw: str

    def __post_init__(self) -> None:
        if not isinstance(self.raw, str):
            raise TypeError(f"Version must be a string, got {type(self.raw).__name__}")

    def __str__(self) -> str:
        return self.raw

    @property
    def components(self) -> list[VersionComponent]:
        """Return the decomposed components of this version."""
        return decompose(self.raw)

    def _equality_key(self) -> tuple[tuple[bool, str], ...]:
        return tuple(
            (c.is_numeric, _significant_digits(c.text) if c.is_numeric else c.text)
            for c in self.components
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlexVersion):
            return NotImplemented
        return compare(self, other) == 0

    def __hash__(self) -> int:
        return hash(self._equality_key())

    def __lt__(self, other: FlexVersion) -> bool:
        if not isinstance(other, FlexVersion):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: FlexVersion) -> bool:
        if not isinstance(other, FlexVersion):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: FlexVersion) -> bool:
        if not isinstance(other, FlexVersion):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: FlexVersion) -> bool:
        if not isinstance(other, FlexVersion):
            return NotImplemented
        return compare(self, other) >= 0


def _raw(version: Union[str, FlexVersion]) -> str:
    if isinstance(version, FlexVersion):
        return version.raw
    if isinstance(version, str):
        return version
    raise TypeError(f"Version must be a string, got {type(version).__name__}")


def compare(version1: Union[str, FlexVersion], version2: Union[str, FlexVersion]) -> int:
    """Compare two free-form version strings.

    Args:
        version1: First version (string or FlexVersion)
        version2: Second version (string or FlexVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        TypeError: If either argument is not a string or FlexVersion

    Note:
        Any pair of strings has a defined order; nothing is rejected as
        malformed.

    Examples:
        >>> compare("9", "10")
        -1
        >>> compare("1.0.0-beta", "1.0.0")
        -1
        >>> compare("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare("1.0", "1")
        1
    """
    left = decompose(_raw(version1))
    right = decompose(_raw(version2))

    for a, b in zip_longest(left, right, fillvalue=NULL):
        result = compare_components(a, b)
        if result != 0:
            return -1 if result < 0 else 1

    return 0


def version_key(version: Union[str, FlexVersion]) -> FlexVersion:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or FlexVersion

    Returns:
        A FlexVersion, which orders by FlexVer

    Examples:
        >>> sorted(["1.10", "1.9", "1.0.0-beta", "1.0.0"], key=version_key)
        ['1.0.0-beta', '1.0.0', '1.9', '1.10']
    """
    return version if isinstance(version, FlexVersion) else FlexVersion(version)
