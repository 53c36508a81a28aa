from typing import Any, Optional


class QueryError(Exception):
    """base class for every error raised by the query engine."""
    kind = "QueryError"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, message={self.message!r})"


class MissingArgumentError(QueryError, ValueError):
    """a required argument was None or absent"""
    kind = "MissingArgument"


class InvalidTypeError(QueryError, TypeError):
    """an argument has the wrong shape (not callable, not iterable, not ordered, ...)"""
    kind = "InvalidType"


class InvalidConstructionError(QueryError, TypeError):
    """an enumerable was built from a factory that is not a generator function"""
    kind = "InvalidConstruction"


class ArgumentOutOfRangeError(QueryError, ValueError):
    """a numeric argument lies outside its accepted range"""
    kind = "ArgumentOutOfRange"


class InvalidOperationError(QueryError, ValueError):
    """the operation cannot be performed on the current sequence"""
    kind = "InvalidOperation"


class EmptyInputError(InvalidOperationError):
    """the operation needs at least one (matching) element"""
    kind = "EmptyInput"


class TooManyMatchesError(InvalidOperationError):
    """more than one element matched where exactly one was required"""
    kind = "TooManyMatches"


class SelectorFailedError(QueryError, ValueError):
    """a caller-supplied selector produced a missing or invalid result"""
    kind = "SelectorFailed"

    def __init__(self, item: Any, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.item = item


class IndexOutOfRangeError(QueryError, IndexError):
    kind = "IndexOutOfRange"


class DuplicateKeyError(QueryError, KeyError):
    """a key was produced twice while materializing into a dictionary"""
    kind = "DuplicateKey"

    def __init__(self, key: Any, message: Optional[str] = None):
        super().__init__(message or f"an item with the same key has already been added: {key!r}")
        self.key = key


class ArithmeticOverflowError(QueryError, OverflowError):
    """a numeric accumulation left the supported range or became non-finite"""
    kind = "ArithmeticOverflow"


class InvalidNumericError(QueryError, TypeError):
    """a numeric operator met a non-numeric value"""
    kind = "InvalidNumeric"
