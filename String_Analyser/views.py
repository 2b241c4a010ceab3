from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status, generics
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
from .models import StringRecord
from .serializers import (
    StringAnalyzeSerializer,
    StringRecordSerializer,
    NaturalLanguageQuerySerializer,
    ErrorResponseSerializer,
    StringListResponseSerializer,
    NaturalLanguageResponseSerializer,
)
from .filters import StringRecordFilter
from .exceptions import DuplicateValue, StringNotFound, UnparsableQuery
from . import services


def error_response(exc, status_code):
    return Response({"error": str(exc)}, status=status_code)


# 1️⃣ POST & GET /strings


class StringAnalyzerView(generics.ListAPIView):
    queryset = StringRecord.objects.all()
    serializer_class = StringRecordSerializer
    filterset_class = StringRecordFilter

    @swagger_auto_schema(
        request_body=StringAnalyzeSerializer,
        operation_summary="Analyze and store a new string",
        responses={
            201: StringRecordSerializer,
            400: "Invalid request body or missing \"value\" field",
            409: ErrorResponseSerializer,
            422: "Invalid data type for \"value\" (must be string)",
        },
        tags=['strings'],
    )
    def post(self, request):
        serializer = StringAnalyzeSerializer(data=request.data)
        if not serializer.is_valid():
            value_errors = serializer.errors.get('value', [])
            if any(getattr(err, 'code', None) == 'invalid_type' for err in value_errors):
                return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            record = serializer.save()
        except DuplicateValue as e:
            return error_response(e, status.HTTP_409_CONFLICT)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        operation_summary="List all analyzed strings",
        manual_parameters=[
            openapi.Parameter(
                "is_palindrome",
                openapi.IN_QUERY,
                description="Filter by palindrome (true/false)",
                type=openapi.TYPE_BOOLEAN,
            ),
            openapi.Parameter(
                "min_length",
                openapi.IN_QUERY,
                description="Minimum string length (inclusive)",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "max_length",
                openapi.IN_QUERY,
                description="Maximum string length (inclusive)",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "word_count",
                openapi.IN_QUERY,
                description="Exact word count",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "contains_character",
                openapi.IN_QUERY,
                description="Single character that must be present in the string",
                type=openapi.TYPE_STRING,
            ),
        ],
        responses={200: StringListResponseSerializer, 400: "Invalid query parameter values or types"},
        tags=['strings'],
    )
    def get(self, request, *args, **kwargs):
        filterset = self.filterset_class(request.query_params, queryset=self.get_queryset(), request=request)
        if not filterset.is_valid():
            return Response(filterset.errors, status=status.HTTP_400_BAD_REQUEST)

        records = filterset.qs
        serializer = self.get_serializer(records, many=True)

        return Response({
            "data": serializer.data,
            "count": len(records),
            "filters_applied": filterset.filter_spec.as_dict(),
        }, status=status.HTTP_200_OK)

# 2️⃣ GET &  DELETE  /strings/{string_value}


class StringDetailView(APIView):

    @swagger_auto_schema(
        operation_summary="Get a specific string by its value",
        responses={200: StringRecordSerializer, 404: ErrorResponseSerializer},
        tags=['strings'],
    )
    def get(self, request, value):
        try:
            record = services.retrieve(value)
        except StringNotFound as e:
            return error_response(e, status.HTTP_404_NOT_FOUND)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Delete a string by its value",
        responses={204: "String successfully deleted", 404: ErrorResponseSerializer},
        tags=['strings'],
    )
    def delete(self, request, value):
        try:
            services.remove(value)
        except StringNotFound as e:
            return error_response(e, status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


# 4️⃣ GET /strings/filter-by-natural-language

class NaturalLanguageFilterView(APIView):
    @swagger_auto_schema(
        operation_summary="Filter analyzed strings using natural language queries",
        operation_description=(
            "Supported patterns include:\n"
            "- \"all single word palindromic strings\" → word_count=1, is_palindrome=true\n"
            "- \"strings longer than 10 characters\" → min_length=11\n"
            "- \"palindromic strings that contain the letter z\" → is_palindrome=true, contains_character=z\n"
            "- \"strings containing the letter a\" → contains_character=a\n"
            "- \"two word strings\" → word_count=2"
        ),
        manual_parameters=[
            openapi.Parameter(
                "query",
                openapi.IN_QUERY,
                description="Natural language query, e.g. 'all single word palindromic strings'",
                type=openapi.TYPE_STRING,
                required=True,
            )
        ],
        responses={200: NaturalLanguageResponseSerializer, 400: ErrorResponseSerializer},
        tags=['strings'],
    )
    def get(self, request):
        params = NaturalLanguageQuerySerializer(data=request.query_params)
        if not params.is_valid():
            return Response(params.errors, status=status.HTTP_400_BAD_REQUEST)

        query = params.validated_data["query"]
        try:
            result = services.filter_by_text(query)
        except UnparsableQuery as e:
            return Response({
                "error": str(e),
                "interpreted_query": {
                    "original": query,
                    "parsed_filters": {}
                }
            }, status=status.HTTP_400_BAD_REQUEST)

        serialized = StringRecordSerializer(result.data, many=True)

        return Response({
            "data": serialized.data,
            "count": result.count,
            "interpreted_query": {
                "original": query,
                "parsed_filters": result.parsed_filters.as_dict()
            }
        }, status=status.HTTP_200_OK)
