"""Compiled pattern table and lexical constants for title casing.

WHY: Every classification rule and both line-level passes are expressed as
regular expressions over two shared building blocks: a punctuation
character class and the list of small words. Keeping them in one immutable
table means the rules read as names (``table.small_first``) and the
expressions are compiled exactly once per process.

HOW: build_patterns() compiles every expression into a frozen PatternTable.
get_patterns() memoizes that result, so callers that do not pass a table
explicitly all share the same instance.

RULES:
- The small-word list follows the New York Times Manual of Style, plus
  'v', 'vs' and 'via'.
- small_words, small_first, small_last, apos_second and inline_period are
  case-insensitive; the others are case-sensitive.
- phrase_break / phrase_start are the word-level form of sub_phrase, used so
  phrase repair can skip locked words.
- The table is read-only; never mutate or recompile it at runtime.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Pattern

SMALL_WORDS = r"a|an|and|as|at|but|by|en|for|if|in|of|on|or|the|to|v\.?|via|vs\.?|with"

PUNCTUATION = "!\"“#$%&'‘()*+,-–‒—―./:;?@[\\]_`{|}~"

# Marks after which a small word starts a new phrase
PHRASE_BREAKS = ":.;?!-–‒—―"

_P = "[{}]".format(re.escape(PUNCTUATION))
_BREAK = "[{}]".format(re.escape(PHRASE_BREAKS))


@dataclass(frozen=True)
class PatternTable:
    """All compiled patterns used by the classifier and line transformer.

    Attributes:
        small_words: Whole word is a small word.
        small_first: Small word at the start, with leading punctuation in
            group 1 and the word in group 2.
        small_last: Small word at the end (group 1), allowing one trailing
            punctuation character.
        sub_phrase: Break mark plus space plus small word, on a joined line.
            Reference form of phrase repair; core.repair_phrases() applies
            it word by word through phrase_break and phrase_start so that
            locked words can be skipped.
        phrase_break: Word ending in a sentence-breaking mark.
        phrase_start: Word beginning with a lowercase small word (group 1).
        apos_second: d'/o'/l' contractions such as "d'Artagnan".
        mac_mc: Mac/Mc name prefix (group 1) and the remainder (group 2).
        inline_period: Period between two letters ("e.g", "example.com").
        uc_elsewhere: Uppercase letter after another letter ("eBay").
        uc_initials: Uppercase initials ("U.S.A", "J.R.R.").
        cap_first: First letter after any leading punctuation.
    """

    small_words: Pattern
    small_first: Pattern
    small_last: Pattern
    sub_phrase: Pattern
    phrase_break: Pattern
    phrase_start: Pattern
    apos_second: Pattern
    mac_mc: Pattern
    inline_period: Pattern
    uc_elsewhere: Pattern
    uc_initials: Pattern
    cap_first: Pattern


def build_patterns() -> PatternTable:
    """Compile a fresh PatternTable. Prefer get_patterns() in normal use."""
    return PatternTable(
        small_words=re.compile(r"^(?:{})$".format(SMALL_WORDS), re.IGNORECASE),
        small_first=re.compile(
            r"^({}*)({})\b".format(_P, SMALL_WORDS), re.IGNORECASE
        ),
        small_last=re.compile(
            r"\b({}){}?$".format(SMALL_WORDS, _P), re.IGNORECASE
        ),
        sub_phrase=re.compile(r"({} )({})".format(_BREAK, SMALL_WORDS)),
        phrase_break=re.compile(r"{}$".format(_BREAK)),
        phrase_start=re.compile(r"^({})".format(SMALL_WORDS)),
        apos_second=re.compile(r"^[dol]['‘][a-z]+(?:['s]{2})?$", re.IGNORECASE),
        mac_mc=re.compile(r"^([Mm]a?c|MA?C)(\w.+)"),
        inline_period=re.compile(r"[a-z][.][a-z]", re.IGNORECASE),
        uc_elsewhere=re.compile(r"[A-Za-z][A-Z]"),
        uc_initials=re.compile(r"^(?:[A-Z]\.|[A-Z]\.[A-Z])+$"),
        cap_first=re.compile(r"^{}*?([^\W\d_])".format(_P)),
    )


@lru_cache(maxsize=None)
def get_patterns() -> PatternTable:
    """Return the process-wide PatternTable, compiling it on first use."""
    return build_patterns()
