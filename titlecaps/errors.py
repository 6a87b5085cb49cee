"""Exception types raised by titlecaps.

The transform itself never fails on string input. The only faults that can
surface come from the caller's side: a broken override callback or a
wordlist file that cannot be read.
"""


class TitlecapsError(Exception):
    """Base class for all titlecaps errors."""


class OverrideError(TitlecapsError):
    """Raised when a caller-supplied override callback fails.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, word: str, message: str):
        self.word = word
        super().__init__("Override failed for word {!r}: {}".format(word, message))
