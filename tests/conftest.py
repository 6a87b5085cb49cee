"""Shared test fixtures for the titlecaps test suite.

WHY: Several test modules need the same override callbacks and wordlist
files. Centralizing them here keeps the expected spellings in one place.

HOW: Pytest fixtures provide the shared pattern table, an override that
fixes "nasa" to "NASA", and a wordlist file written to tmp_path.

RULES:
- File-based fixtures use tmp_path for isolation.
- Override fixtures are plain functions, matching the Override signature.
"""

import pytest

from titlecaps.patterns import get_patterns

WORDLIST_TEXT = """# Acronyms and brand names
NASA

  iPhone  
U.S.A.
"""


@pytest.fixture
def patterns():
    """The process-wide compiled PatternTable."""
    return get_patterns()


@pytest.fixture
def nasa_override():
    """Override that spells 'nasa' as 'NASA' regardless of line case."""
    def override(word, line_all_caps):
        if word.lower() == "nasa":
            return "NASA"
        return None
    return override


@pytest.fixture
def wordlist_file(tmp_path):
    """A wordlist with comments, blank lines and padded terms."""
    path = tmp_path / "terms.txt"
    path.write_text(WORDLIST_TEXT, encoding="utf-8")
    return path
