class StringAnalyzerError(Exception):
    """Base class for errors reported by the string analyzer service."""

    default_message = "String analyzer error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class DuplicateValue(StringAnalyzerError):
    default_message = "String already exists in the system"


class StringNotFound(StringAnalyzerError):
    default_message = "String does not exist in the system"


class UnparsableQuery(StringAnalyzerError):
    default_message = "Unable to parse natural language query"
