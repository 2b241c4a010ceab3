from django import forms
from django_filters import rest_framework as filters

from . import services
from .matching import FilterSpec
from .models import StringRecord


class IntegerFilter(filters.NumberFilter):
    field_class = forms.IntegerField


def parse_bool(value):
    return value == "true"


class StringRecordFilter(filters.FilterSet):
    """
    Validates the list query parameters and applies them as a FilterSpec.

    The checks run in Python rather than SQL so that ``contains_character``
    stays case-sensitive on every database backend.
    """

    # only the literal tokens true and false are accepted
    is_palindrome = filters.TypedChoiceFilter(
        choices=[("true", "true"), ("false", "false")], coerce=parse_bool, empty_value=None)
    min_length = IntegerFilter(min_value=0)
    max_length = IntegerFilter(min_value=0)
    word_count = IntegerFilter(min_value=0)
    contains_character = filters.CharFilter(
        min_length=1, max_length=1, strip=False)

    class Meta:
        model = StringRecord
        fields = []

    @property
    def filter_spec(self) -> FilterSpec:
        return FilterSpec.from_mapping(self.form.cleaned_data)

    def filter_queryset(self, queryset):
        return services.list_strings(self.filter_spec, queryset)
