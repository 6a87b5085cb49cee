"""Line and document level title casing.

WHY: Word classification alone cannot know where a line starts or ends, or
that a small word follows a colon. Those decisions need the whole line, and
they must leave alone any word the classifier already locked.

HOW: Each line goes through four phases:
  1. Line.from_text() splits on whitespace and records whether the line is
     all caps.
  2. classify() runs the rule chain over every word.
  3. force_boundaries() capitalizes an adjustable small word that opens or
     closes the line (only when boundary forcing is on).
  4. repair_phrases() capitalizes an adjustable small word that follows a
     sentence-breaking mark, then join_words() rebuilds the line.
convert() applies this to every line of the input independently.

RULES:
- Lines are split on "\\n" and rejoined with "\\n"; line count and order are
  preserved, including a trailing empty line.
- Whitespace inside a line collapses to single spaces.
- Locked words are never modified after classification.
- No state is carried from one line to the next.
"""

import logging
from typing import List, Optional

from .classifier import capitalize, classify
from .models import Adjustable, ClassifiedWord, Line, Override, TitlecaseOptions
from .patterns import PatternTable, get_patterns

logger = logging.getLogger(__name__)


def _capitalize_group(match, group: int) -> str:
    start, end = match.span(group)
    text = match.string
    return text[:start] + capitalize(match.group(group)) + text[end:]


def force_boundaries(
    words: List[ClassifiedWord], patterns: PatternTable
) -> List[ClassifiedWord]:
    """Capitalize an adjustable small word at the start or end of a line.

    Leading punctuation on the first word ("(the") and one trailing mark on
    the last word ("of.") are kept in place.
    """
    if not words:
        return words
    words = list(words)

    first = words[0]
    if isinstance(first, Adjustable):
        match = patterns.small_first.search(first.text)
        if match:
            words[0] = Adjustable(_capitalize_group(match, 2))

    last = words[-1]
    if isinstance(last, Adjustable):
        match = patterns.small_last.search(last.text)
        if match:
            words[-1] = Adjustable(_capitalize_group(match, 1))

    return words


def repair_phrases(
    words: List[ClassifiedWord], patterns: PatternTable
) -> List[ClassifiedWord]:
    """Capitalize a small word that starts a new phrase mid-line.

    "Rocky: the story" becomes "Rocky: The Story". This is the same as
    running patterns.sub_phrase over the space-joined line, except that
    locked words are skipped.
    """
    repaired = list(words)
    for i in range(1, len(repaired)):
        word = repaired[i]
        if not isinstance(word, Adjustable):
            continue
        if not patterns.phrase_break.search(repaired[i - 1].text):
            continue
        match = patterns.phrase_start.match(word.text)
        if match:
            repaired[i] = Adjustable(_capitalize_group(match, 1))
    return repaired


def join_words(words: List[ClassifiedWord]) -> str:
    return " ".join(word.text for word in words)


def convert_line(
    text: str,
    options: Optional[TitlecaseOptions] = None,
    patterns: Optional[PatternTable] = None,
) -> str:
    """Title-case a single line (no newlines expected)."""
    if options is None:
        options = TitlecaseOptions()
    if patterns is None:
        patterns = get_patterns()

    line = Line.from_text(text)
    classified = [classify(word, line.all_caps, options, patterns) for word in line.words]
    if options.boundary_forcing:
        classified = force_boundaries(classified, patterns)
    return join_words(repair_phrases(classified, patterns))


def convert(
    text: str,
    boundary_forcing: bool = True,
    override: Optional[Override] = None,
) -> str:
    """Convert text to title case, line by line.

    WHY: This is the public entry point. Callers hand over a whole document
    and get back the same number of lines, each title-cased on its own.

    HOW: Builds one TitlecaseOptions for the call, then runs convert_line()
    over every line with the shared pattern table.

    RULES:
    - Total over str input: empty text returns "".
    - override(word, line_all_caps) returning a non-empty string wins over
      every other rule and is never recapitalized.
    - boundary_forcing=False leaves small words at line edges lowercase.

    Args:
        text: Input text, possibly spanning several lines.
        boundary_forcing: Capitalize small words opening or closing a line.
        override: Optional callback for words with a fixed spelling.

    Returns:
        The title-cased text.

    Raises:
        TypeError: If text is not a string.
        OverrideError: If the override callback raises.
    """
    if not isinstance(text, str):
        raise TypeError("convert() expects str, got {}".format(type(text).__name__))

    options = TitlecaseOptions(boundary_forcing=boundary_forcing, override=override)
    patterns = get_patterns()
    lines = text.split("\n")
    logger.debug("Converting %d line(s)", len(lines))
    return "\n".join(convert_line(line, options, patterns) for line in lines)
