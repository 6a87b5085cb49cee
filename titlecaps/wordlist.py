"""Wordlists of terms with a fixed spelling.

WHY: Acronyms and brand names ("NASA", "iPhone", "PostgreSQL") cannot be
recognised by pattern alone, especially on all-caps or all-lowercase lines.
A plain-text list of such terms is the simplest way for users to teach the
converter about them.

HOW: load_wordlist() reads one term per line. wordlist_override() turns the
terms into an override callback that returns the listed spelling whenever a
word matches a term case-insensitively.

RULES:
- One term per line, whitespace stripped.
- Blank lines and lines starting with '#' are ignored.
- Matching ignores case; the spelling in the list is returned verbatim.
- Trailing punctuation on the word ("nasa,") is kept after the term.
- When the same term appears twice, the later spelling wins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .models import Override

logger = logging.getLogger(__name__)

TRAILING_PUNCT = ".,;:!?)]\"'’”"


def load_wordlist(path: str | Path) -> list[str]:
    """Load terms from a wordlist file.

    Args:
        path: Path to a UTF-8 text file, one term per line.

    Returns:
        Terms in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    terms = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        terms.append(line)
    logger.debug("Loaded %d term(s) from %s", len(terms), path)
    return terms


def wordlist_override(terms: Iterable[str]) -> Override:
    """Build an override callback from a list of terms."""
    spellings = {term.lower(): term for term in terms}

    def override(word: str, line_all_caps: bool) -> str | None:
        term = spellings.get(word.lower())
        if term is not None:
            return term
        stem = word.rstrip(TRAILING_PUNCT)
        if not stem or stem == word:
            return None
        trailing = word[len(stem):]
        term = spellings.get(stem.lower())
        if term is None:
            return None
        return term + trailing

    return override
