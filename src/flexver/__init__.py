# SPDX-License-Identifier: MIT
"""Intuitive ordering for free-form version strings.

FlexVer compares version strings the way people read them rather than
requiring a fixed grammar. It is SemVer-compatible where versions follow
SemVer ("1.0.0-rc.1" < "1.0.0"), and makes a best effort for everything
else ("1.10" > "1.9", "1.0.0a" > "1.0.0", "v2+build" == "v2").

Example:
    >>> from flexver import compare, decompose, version_key
    >>>
    >>> compare("1.9", "1.10")
    -1
    >>> compare("1.0.0-beta.2", "1.0.0")
    -1
    >>> [c.text for c in decompose("1.2a")]
    ['1', '.', '2', 'a']
    >>>
    >>> sorted(["2.0", "1.0-rc1", "1.0"], key=version_key)
    ['1.0-rc1', '1.0', '2.0']
"""

__version__ = "1.0.0"

from .components import (
    NULL,
    ComponentKind,
    VersionComponent,
    decompose,
    strip_build_metadata,
)
from .compare import (
    FlexVersion,
    compare,
    compare_components,
    version_key,
)

__all__ = [
    # Decomposition
    "ComponentKind",
    "VersionComponent",
    "NULL",
    "decompose",
    "strip_build_metadata",
    # Comparison
    "compare",
    "compare_components",
    "FlexVersion",
    "version_key",
]
