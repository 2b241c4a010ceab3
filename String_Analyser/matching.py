from dataclasses import dataclass, fields
from typing import Mapping, Optional


@dataclass
class FilterSpec:
    """Structured filter criteria. Every field is optional and independent."""

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "FilterSpec":
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names and v not in (None, '')})

    def as_dict(self) -> dict:
        """Only the fields that are set, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_empty(self) -> bool:
        return not self.as_dict()


def matches(record, spec: FilterSpec) -> bool:
    """Return True when ``record`` satisfies every field set on ``spec``.

    ``record`` only needs a ``value`` string and a ``properties`` object exposing
    ``length``, ``is_palindrome`` and ``word_count``.
    """
    props = record.properties

    if spec.is_palindrome is not None and props.is_palindrome != spec.is_palindrome:
        return False
    if spec.min_length is not None and props.length < spec.min_length:
        return False
    if spec.max_length is not None and props.length > spec.max_length:
        return False
    if spec.word_count is not None and props.word_count != spec.word_count:
        return False
    if spec.contains_character is not None and spec.contains_character not in record.value:
        return False
    return True
