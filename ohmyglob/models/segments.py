from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(slots=True, frozen=True)
class Literal:
    """A pattern fragment that is not a bare ``*`` or ``**``.

    ``text`` may still contain ``*`` characters; those are zero-or-more
    character wildcards scoped to a single path segment.
    """

    text: str
    has_star: bool

    @classmethod
    def of(cls, text: str) -> Literal:
        return cls(text, "*" in text)

    @property
    def is_wildcard_suffix(self) -> bool:
        """True for ``*suffix``: one leading star and no other."""
        return self.has_star and "*" not in self.text[1:]


@dataclass(slots=True, frozen=True)
class SingleWildcard:
    """A bare ``*`` fragment: exactly one path segment."""


@dataclass(slots=True, frozen=True)
class DoubleWildcard:
    """A bare ``**`` fragment: zero or more whole path segments."""


Segment: TypeAlias = Literal | SingleWildcard | DoubleWildcard

