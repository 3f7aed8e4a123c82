from enum import Enum


class ErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    WRONG_TYPE = "wrong_type"
    DUPLICATE_VALUE = "duplicate_value"
    NOT_FOUND = "not_found"
    INVALID_FILTER_PARAM = "invalid_filter_param"
    UNRECOGNIZED_PHRASE = "unrecognized_phrase"


class StringAnalyzerError(Exception):
    """Base class for request-scoped errors raised by the service"""

    kind: ErrorKind
    default_message = "String analyzer error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFieldError(StringAnalyzerError):
    kind = ErrorKind.MISSING_FIELD
    default_message = 'Invalid request body or missing "value" field'


class WrongTypeError(StringAnalyzerError):
    kind = ErrorKind.WRONG_TYPE
    default_message = 'Invalid data type for "value" (must be string)'


class DuplicateValueError(StringAnalyzerError):
    kind = ErrorKind.DUPLICATE_VALUE
    default_message = "String already exists in the system"


class NotFoundError(StringAnalyzerError):
    kind = ErrorKind.NOT_FOUND
    default_message = "String does not exist in the system"


class InvalidFilterParamError(StringAnalyzerError):
    kind = ErrorKind.INVALID_FILTER_PARAM
    default_message = "Invalid query parameter values or types"


class UnrecognizedPhraseError(StringAnalyzerError):
    kind = ErrorKind.UNRECOGNIZED_PHRASE
    default_message = "Unable to parse natural language query"
