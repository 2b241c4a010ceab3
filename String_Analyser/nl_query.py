"""Rule-based translation of natural language queries into a FilterSpec.

The rules run in a fixed order over one accumulator and later rules overwrite
fields set by earlier ones. Reordering them changes the parsed result.
"""
import re

from .matching import FilterSpec

LONGER_THAN_RE = re.compile(r"longer than (\d+)")
SHORTER_THAN_RE = re.compile(r"shorter than (\d+)")
EXACT_LENGTH_RE = re.compile(r"length (?:of )?(\d+)|(\d+) characters? long")
CONTAINS_RE = re.compile(r"contain(?:ing|s)? (?:the )?(?:letter |character )?([a-z])")

VOWELS = ("a", "e", "i", "o", "u")

WORD_COUNT_PHRASES = (
    (("single word", "one word"), 1),
    (("two word", "2 word"), 2),
    (("three word", "3 word"), 3),
)


def _palindrome(text, spec):
    if "palindrom" in text or "reads same forwards and backwards" in text:
        spec.is_palindrome = True


def _word_count(text, spec):
    for phrases, count in WORD_COUNT_PHRASES:
        if any(phrase in text for phrase in phrases):
            spec.word_count = count
            return


def _longer_than(text, spec):
    match = LONGER_THAN_RE.search(text)
    if match:
        spec.min_length = int(match.group(1)) + 1


def _shorter_than(text, spec):
    match = SHORTER_THAN_RE.search(text)
    if match:
        spec.max_length = int(match.group(1)) - 1


def _exact_length(text, spec):
    match = EXACT_LENGTH_RE.search(text)
    if match:
        length = int(match.group(1) or match.group(2))
        spec.min_length = length
        spec.max_length = length


def _contains_letter(text, spec):
    match = CONTAINS_RE.search(text)
    if match:
        spec.contains_character = match.group(1)


def _first_vowel(text, spec):
    if "first vowel" in text:
        spec.contains_character = "a"


def _vowel_in_query(text, spec):
    # scans the query text itself, not the stored strings
    if "vowel" not in text or "first vowel" in text:
        return
    for vowel in VOWELS:
        if vowel in text:
            spec.contains_character = vowel
            return


RULES = (
    _palindrome,
    _word_count,
    _longer_than,
    _shorter_than,
    _exact_length,
    _contains_letter,
    _first_vowel,
    _vowel_in_query,
)


def interpret(query: str) -> FilterSpec:
    """Parse ``query`` into a FilterSpec. An empty result means the query was not understood."""
    text = query.lower()
    spec = FilterSpec()
    for rule in RULES:
        rule(text, spec)
    return spec
