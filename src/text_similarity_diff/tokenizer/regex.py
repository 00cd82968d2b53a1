"""RegexTokenizer: default sentence and word splitter.

Sentences end at a run of ``.``, ``!`` or ``?`` followed by whitespace and an
ASCII capital letter.  Common abbreviations ("Dr.", "e.g.", "U.S.", ...) are
swapped for placeholders before splitting so their periods never end a
sentence, then restored.

Words are whitespace-separated fields with every character outside
``[a-zA-Z0-9]`` removed; fields left empty are dropped.
"""

from __future__ import annotations

import re

# Order matters: longer forms that contain a shorter one come first
# ("Corp." before "Co.").
ABBREVIATIONS: tuple[str, ...] = (
    "Mr.",
    "Mrs.",
    "Ms.",
    "Dr.",
    "Prof.",
    "Sr.",
    "Jr.",
    "vs.",
    "etc.",
    "i.e.",
    "e.g.",
    "U.S.",
    "U.K.",
    "U.N.",
    "Inc.",
    "Corp.",
    "Ltd.",
    "Co.",
    "a.m.",
    "p.m.",
)

# Group 1: terminal punctuation run.  Group 2: capital opening the next sentence.
_BOUNDARY = re.compile(r"([.!?]+)\s+([A-Z])")

_NON_WORD = re.compile(r"[^a-zA-Z0-9]")


def _placeholder(index: int) -> str:
    return f"\x00ABBR{index}\x00"


class RegexTokenizer:
    """Regex-based tokenizer satisfying the ``Tokenizer`` protocol.

    Stateless; one instance can be shared across threads.

    Example::

        tok = RegexTokenizer()
        tok.split_sentences("Dr. Smith left. He was late.")
        # ["Dr. Smith left.", "He was late."]
        tok.split_words("Hello, world!")
        # ["Hello", "world"]
    """

    def split_sentences(self, text: str) -> list[str]:
        """Split ``text`` into stripped, non-empty sentences.

        Abbreviations are matched as plain substrings, so a word ending in
        one (``"devs."`` ends in ``"vs."``) does not close its sentence.

        Args:
            text: Raw text.

        Returns:
            Sentences in order.  A non-blank text without any boundary is a
            single sentence; an empty text gives ``[]``.
        """
        if not text:
            return []

        for i, abbr in enumerate(ABBREVIATIONS):
            text = text.replace(abbr, _placeholder(i))

        sentences: list[str] = []
        last_end = 0
        for match in _BOUNDARY.finditer(text):
            sentence = text[last_end : match.end(1)].strip()
            if sentence:
                sentences.append(sentence)
            last_end = match.start(2)

        tail = text[last_end:].strip()
        if tail:
            sentences.append(tail)

        restored: list[str] = []
        for sentence in sentences:
            for i, abbr in enumerate(ABBREVIATIONS):
                sentence = sentence.replace(_placeholder(i), abbr)
            restored.append(sentence)
        return restored

    def split_words(self, text: str) -> list[str]:
        """Split ``text`` into punctuation-stripped ASCII alphanumeric words."""
        words: list[str] = []
        for field in text.split():
            word = _NON_WORD.sub("", field)
            if word:
                words.append(word)
        return words
