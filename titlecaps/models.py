"""Data models for the title-case transform.

WHY: The classifier decides two things per word: its new casing, and whether
the line-level passes may still touch it. Modelling that as two variants
instead of a flag lets the boundary pass and phrase repair check the type
(``isinstance(word, Adjustable)``) rather than trust a boolean.

HOW: Locked and Adjustable are frozen dataclasses that only carry text.
ClassifiedWord is their union. TitlecaseOptions bundles the two caller
settings and is threaded explicitly through every call, including recursive
classification of compound words.

RULES:
- Locked text is final: boundary forcing and phrase repair never change it.
- Adjustable text may be recapitalized by the line-level passes.
- Override callbacks return None or "" to mean "no opinion".
- Python 3.9 compatible (typing.Union, no X | Y in runtime aliases).
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

Override = Callable[[str, bool], Optional[str]]


@dataclass(frozen=True)
class Locked:
    """A word whose casing was fixed by a rule and must not change again."""

    text: str


@dataclass(frozen=True)
class Adjustable:
    """A word that boundary forcing and phrase repair may recapitalize."""

    text: str


ClassifiedWord = Union[Locked, Adjustable]


@dataclass(frozen=True)
class TitlecaseOptions:
    """Caller settings for one conversion.

    Attributes:
        boundary_forcing: Capitalize small words that open or close a line.
        override: Optional callback ``(word, line_all_caps) -> str | None``.
            A non-empty return value is used verbatim and locked.
    """

    boundary_forcing: bool = True
    override: Optional[Override] = None


@dataclass
class Line:
    """The words of one input line and whether that line is all caps."""

    words: List[str] = field(default_factory=list)
    all_caps: bool = False

    @classmethod
    def from_text(cls, text: str) -> "Line":
        return cls(words=text.split(), all_caps=text.upper() == text)
