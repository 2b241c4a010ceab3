from rest_framework import serializers
from .models import StringRecord
from . import services


class StringPropertiesSerializer(serializers.Serializer):
    length = serializers.IntegerField()
    is_palindrome = serializers.BooleanField()
    unique_characters = serializers.IntegerField()
    word_count = serializers.IntegerField()
    sha256_hash = serializers.CharField()
    character_frequency_map = serializers.DictField(child=serializers.IntegerField())


class StringRecordSerializer(serializers.ModelSerializer):
    id = serializers.CharField(source="sha256_hash", read_only=True)
    properties = StringPropertiesSerializer(read_only=True)

    class Meta:
        model = StringRecord
        fields = ["id", "value", "properties", "created_at"]
        read_only_fields = ["value"]


class StringAnalyzeSerializer(serializers.Serializer):
    value = serializers.CharField(trim_whitespace=False)

    def to_internal_value(self, data):
        value = data.get('value') if hasattr(data, 'get') else None
        if value is not None and not isinstance(value, str):
            raise serializers.ValidationError(
                {'value': ["Value must be a string."]}, code='invalid_type')
        return super().to_internal_value(data)

    def create(self, validated_data):
        return services.analyze(validated_data['value'])


class NaturalLanguageQuerySerializer(serializers.Serializer):
    query = serializers.CharField(min_length=3, trim_whitespace=False)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class StringListResponseSerializer(serializers.Serializer):
    data = StringRecordSerializer(many=True)
    count = serializers.IntegerField()
    filters_applied = serializers.DictField()


class InterpretedQuerySerializer(serializers.Serializer):
    original = serializers.CharField()
    parsed_filters = serializers.DictField()


class NaturalLanguageResponseSerializer(serializers.Serializer):
    data = StringRecordSerializer(many=True)
    count = serializers.IntegerField()
    interpreted_query = InterpretedQuerySerializer()
