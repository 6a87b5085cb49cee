"""English title casing with small-word handling.

WHY: str.title() capitalizes every word, including "of" and "the", and
mangles acronyms, contractions and Mc names. Headings need the publishing
convention instead: capitalize everything except small words, unless a
small word opens or closes the line or starts a new phrase.

HOW: The single public entry point is convert(text). Each word is run
through an ordered chain of pattern rules (classifier.py), then each line
gets its first/last words and phrase openers fixed up (core.py). An
optional override callback, for example one built from a wordlist, takes
precedence over every rule.

RULES:
- convert() is pure: no I/O, no global mutable state, no environment reads.
- Input and output have the same number of lines.
- Python 3.9 compatible (no match/case, no X | Y unions at runtime).
"""

from .classifier import capitalize, classify
from .core import convert, convert_line
from .errors import OverrideError, TitlecapsError
from .models import Adjustable, ClassifiedWord, Locked, Override, TitlecaseOptions
from .patterns import PatternTable, get_patterns
from .wordlist import load_wordlist, wordlist_override

__version__ = "1.0.0"

__all__ = [
    "convert",
    "convert_line",
    "classify",
    "capitalize",
    "get_patterns",
    "PatternTable",
    "TitlecaseOptions",
    "Locked",
    "Adjustable",
    "ClassifiedWord",
    "Override",
    "load_wordlist",
    "wordlist_override",
    "TitlecapsError",
    "OverrideError",
    "__version__",
]
