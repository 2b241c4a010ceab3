import logging
from dataclasses import dataclass
from typing import List

from django.db import IntegrityError, transaction

from .exceptions import DuplicateValue, StringNotFound, UnparsableQuery
from .matching import FilterSpec, matches
from .models import StringRecord
from .nl_query import interpret
from .utils import analyze_string

logger = logging.getLogger(__name__)


@dataclass
class NaturalLanguageResult:
    data: List[StringRecord]
    count: int
    parsed_filters: FilterSpec


def analyze(value: str) -> StringRecord:
    """
    Analyze ``value`` and store it.

    The unique constraint on ``value`` makes the insert atomic, so a concurrent
    request that stored the same value first surfaces here as DuplicateValue.
    """
    props = analyze_string(value)
    if StringRecord.objects.filter(value=value).exists():
        logger.info("Rejected duplicate string sha256=%s", props.sha256_hash)
        raise DuplicateValue()

    try:
        with transaction.atomic():
            record = StringRecord.objects.create(
                value=value,
                sha256_hash=props.sha256_hash,
                length=props.length,
                is_palindrome=props.is_palindrome,
                unique_characters=props.unique_characters,
                word_count=props.word_count,
                character_frequency_map=props.character_frequency_map,
            )
    except IntegrityError:
        logger.warning("Concurrent insert detected for sha256=%s", props.sha256_hash)
        raise DuplicateValue()

    logger.info("Stored string sha256=%s length=%s", record.sha256_hash, record.length)
    return record


def retrieve(value: str) -> StringRecord:
    try:
        return StringRecord.objects.get(value=value)
    except StringRecord.DoesNotExist:
        raise StringNotFound()


def list_strings(spec: FilterSpec, queryset=None) -> List[StringRecord]:
    """Return stored records matching ``spec``, newest first."""
    if queryset is None:
        queryset = StringRecord.objects.all()
    return [record for record in queryset.order_by('-created_at', 'pk') if matches(record, spec)]


def filter_by_text(query: str) -> NaturalLanguageResult:
    spec = interpret(query)
    if spec.is_empty():
        logger.info("Unparsable natural language query: %r", query)
        raise UnparsableQuery()

    logger.debug("Interpreted %r as %s", query, spec.as_dict())
    data = list_strings(spec)
    return NaturalLanguageResult(data=data, count=len(data), parsed_filters=spec)


def remove(value: str) -> None:
    deleted, _ = StringRecord.objects.filter(value=value).delete()
    if not deleted:
        raise StringNotFound()
    logger.info("Deleted string of length %s", len(value))
