# SPDX-License-Identifier: MIT
"""Decomposition of free-form version strings into typed components.

A version string is split wherever a run of characters changes from ASCII
digits to anything else (or back):

- Numeric: a run of ASCII digits ("10", "007")
- Pre-release: a non-digit run starting with "-" ("-beta.", "-rc")
- Literal: any other non-digit run (".", "v", "a", a lone "-")

Everything from the first "+" onwards is build metadata and is dropped.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

# Maximal runs of ASCII digits or of anything else. [0-9] rather than \d so
# that non-ASCII digits stay literal.
_RUN_PATTERN = re.compile(r"[0-9]+|[^0-9]+")

BUILD_METADATA_SEPARATOR = "+"


class ComponentKind(enum.Enum):
    """Kinds of version component."""

    NUMERIC = "numeric"
    LITERAL = "literal"
    PRERELEASE = "prerelease"
    NULL = "null"


@dataclass(frozen=True, slots=True)
class VersionComponent:
    """One contiguous run of a version string.

    Attributes:
        kind: How the run takes part in comparisons
        text: The characters of the run, exactly as they appeared
    """

    kind: ComponentKind
    text: str

    def __str__(self) -> str:
        return self.text

    @property
    def codepoints(self) -> tuple[int, ...]:
        """Return the Unicode code points making up this component."""
        return tuple(ord(char) for char in self.text)

    @property
    def is_numeric(self) -> bool:
        return self.kind is ComponentKind.NUMERIC


# Stand-in for a position one version has and the other lacks. Never
# produced by decompose().
NULL = VersionComponent(kind=ComponentKind.NULL, text="")


def _make_component(run: str) -> VersionComponent:
    """Type a single run produced by the scanner."""
    if "0" <= run[0] <= "9":
        return VersionComponent(ComponentKind.NUMERIC, run)
    if len(run) > 1 and run[0] == "-":
        return VersionComponent(ComponentKind.PRERELEASE, run)
    return VersionComponent(ComponentKind.LITERAL, run)


def strip_build_metadata(version: str) -> str:
    """Return the part of a version string before the first "+".

    Examples:
        >>> strip_build_metadata("1.0.0+build.5")
        '1.0.0'
        >>> strip_build_metadata("1.0.0")
        '1.0.0'
    """
    return version.partition(BUILD_METADATA_SEPARATOR)[0]


def decompose(version: str) -> list[VersionComponent]:
    """Break a version string into typed components.

    Total over all strings: never raises. An empty string yields an empty
    list. A non-empty string always yields at least one component, so one
    that starts with "+" yields a single empty literal.

    Args:
        version: Any version string

    Returns:
        Components in the order they appear in the string

    Examples:
        >>> [c.text for c in decompose("1.0.0-beta.2+exp")]
        ['1', '.', '0', '.', '0', '-beta.', '2']
        >>> decompose("v2")[0].kind
        <ComponentKind.LITERAL: 'literal'>
        >>> decompose("")
        []
        >>> decompose("+build")
        [VersionComponent(kind=<ComponentKind.LITERAL: 'literal'>, text='')]
    """
    if not version:
        return []

    runs = _RUN_PATTERN.findall(strip_build_metadata(version))
    if not runs:
        # Nothing before the "+": the only place an empty literal appears
        return [VersionComponent(ComponentKind.LITERAL, "")]
    return [_make_component(run) for run in runs]
