"""Per-word classification: the ordered rule chain.

WHY: Whether a word is lowercased, capitalized, or left exactly as written
depends on what it looks like (small word, contraction, Mc name, acronym,
compound) and on whether its line is written in all caps. These checks
overlap, so the order in which they run decides the result.

HOW: Each rule is a function that returns a ClassifiedWord when it applies
and None when it does not. classify() walks RULES in order and returns the
first result. Compound words (Mac/Mc names, slashed and hyphenated words)
are split and each part is classified recursively as if it were a line of
its own.

RULES:
- Order is load-bearing: override, initials, contraction, mac_mc,
  as_authored, small_word, slashed, hyphenated, default.
- Recursion passes the same TitlecaseOptions through unchanged and never
  applies the line-level boundary pass or phrase repair.
- Words containing "//" (URLs) are never split on slashes.
- No rule may raise on short or empty words.
"""

import logging
from typing import Callable, NamedTuple, Optional

from .errors import OverrideError
from .models import Adjustable, ClassifiedWord, Locked, TitlecaseOptions
from .patterns import PatternTable, get_patterns

logger = logging.getLogger(__name__)

VOWELS = "aeiouAEIOU"


class Rule(NamedTuple):
    name: str
    apply: Callable[[str, bool, TitlecaseOptions, PatternTable], Optional[ClassifiedWord]]


def capitalize(token: str) -> str:
    """Lowercase the token, then uppercase its first character."""
    token = token.lower()
    return token[:1].upper() + token[1:]


def _classify_part(part: str, options: TitlecaseOptions, patterns: PatternTable) -> str:
    """Classify one piece of a compound word as a line of its own."""
    return classify(part, part.upper() == part, options, patterns).text


def _split_and_classify(
    word: str, delimiter: str, options: TitlecaseOptions, patterns: PatternTable
) -> str:
    return delimiter.join(
        _classify_part(part, options, patterns) for part in word.split(delimiter)
    )


# =============================================================================
# Rules
# =============================================================================

def _override(word, line_all_caps, options, patterns):
    if options.override is None:
        return None
    try:
        replacement = options.override(word, line_all_caps)
    except Exception as e:
        raise OverrideError(word, str(e)) from e
    if replacement:
        return Locked(replacement)
    return None


def _initials(word, line_all_caps, options, patterns):
    if line_all_caps and patterns.uc_initials.match(word):
        return Locked(word)
    return None


def _contraction(word, line_all_caps, options, patterns):
    if not patterns.apos_second.match(word):
        return None
    # Only the first three positions are recased; the rest keeps its authored
    # case, so "O'NEIL" stays as written even on an all-caps line
    first = word[:1]
    first = first.upper() if first in VOWELS else first.lower()
    return Locked(first + word[1:2] + word[2:3].upper() + word[3:])


def _mac_mc(word, line_all_caps, options, patterns):
    match = patterns.mac_mc.match(word)
    if not match:
        return None
    # Repeated prefixes ("mcmcdonald") are peeled iteratively, not recursively
    prefixes = []
    while match:
        prefix, word = match.groups()
        prefixes.append(capitalize(prefix))
        rest_all_caps = word.upper() == word
        overridden = _override(word, rest_all_caps, options, patterns)
        if overridden is not None:
            return Locked("".join(prefixes) + overridden.text)
        match = patterns.mac_mc.match(word)
    # Override was already consulted for the final remainder
    rest = _apply_rules(RULES[1:], word, rest_all_caps, options, patterns)
    return Locked("".join(prefixes) + rest.text)


def _as_authored(word, line_all_caps, options, patterns):
    if patterns.inline_period.search(word):
        return Locked(word)
    if not line_all_caps and patterns.uc_elsewhere.search(word):
        return Locked(word)
    return None


def _small_word(word, line_all_caps, options, patterns):
    if patterns.small_words.match(word):
        return Adjustable(word.lower())
    return None


def _slashed(word, line_all_caps, options, patterns):
    if "/" in word and "//" not in word:
        return Adjustable(_split_and_classify(word, "/", options, patterns))
    return None


def _hyphenated(word, line_all_caps, options, patterns):
    if "-" in word:
        return Adjustable(_split_and_classify(word, "-", options, patterns))
    return None


def _default(word, line_all_caps, options, patterns):
    if line_all_caps:
        word = word.lower()
    return Adjustable(patterns.cap_first.sub(lambda m: m.group(0).upper(), word, count=1))


RULES = (
    Rule("override", _override),
    Rule("initials", _initials),
    Rule("contraction", _contraction),
    Rule("mac_mc", _mac_mc),
    Rule("as_authored", _as_authored),
    Rule("small_word", _small_word),
    Rule("slashed", _slashed),
    Rule("hyphenated", _hyphenated),
    Rule("default", _default),
)


def classify(
    word: str,
    line_all_caps: bool,
    options: Optional[TitlecaseOptions] = None,
    patterns: Optional[PatternTable] = None,
) -> ClassifiedWord:
    """Classify a single word and return its new casing.

    Args:
        word: One whitespace-free token.
        line_all_caps: Whether the word's line is written entirely in caps.
        options: Conversion settings. Defaults to TitlecaseOptions().
        patterns: Pattern table. Defaults to the shared get_patterns() table.

    Returns:
        Locked or Adjustable wrapping the recased word.

    Raises:
        OverrideError: If the override callback raises.
    """
    if options is None:
        options = TitlecaseOptions()
    if patterns is None:
        patterns = get_patterns()

    return _apply_rules(RULES, word, line_all_caps, options, patterns)


def _apply_rules(rules, word, line_all_caps, options, patterns):
    """Return the first rule result; the last rule (default) always applies."""
    for rule in rules[:-1]:
        result = rule.apply(word, line_all_caps, options, patterns)
        if result is not None:
            break
    else:
        rule = rules[-1]
        result = rule.apply(word, line_all_caps, options, patterns)
    logger.debug("%-11s | %r -> %r", rule.name, word, result.text)
    return result
