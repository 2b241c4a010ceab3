import hashlib
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Dict


@dataclass(frozen=True)
class StringProperties:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return asdict(self)


def to_utf8(value: str) -> bytes:
    """
    Encode as UTF-8. Surrogate pairs are joined and lone surrogates become
    U+FFFD, so every str has a byte form.
    """
    repaired = value.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'replace')
    return repaired.encode('utf-8')


def compute_sha256(value: str) -> str:
    """Compute SHA-256 hash for the string."""
    return hashlib.sha256(to_utf8(value)).hexdigest()


def is_palindrome(value: str) -> bool:
    """Check if string reads the same forward and backward, ignoring case and whitespace."""
    normalized = ''.join(ch for ch in value.lower() if not ch.isspace())
    return normalized == normalized[::-1]


def count_words(value: str) -> int:
    # str.split() with no separator trims and drops empty tokens
    return len(value.split())


def analyze_string(value: str) -> StringProperties:
    """Compute all string properties.

    Characters are Python code points: ``length``, ``unique_characters`` and the
    frequency map all count the same unit.
    """
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(set(value)),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=dict(Counter(value)),
    )
