from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from botocore.exceptions import ClientError


class AlphabarError(Exception):
    """Base exception for all Alphabar errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidFieldError(AlphabarError):
    """Raised when the bucketing field is unset or not an attribute of the source."""

    def __init__(
        self, field: str | None, source: str | None = None, original_error: Exception | None = None
    ) -> None:
        if field is None:
            msg = "No field configured for bucketing"
        else:
            msg = f"Invalid field '{field}'"
            if source:
                msg += f" for {source}"
        super().__init__(msg, original_error)
        self.field = field
        self.source = source


class ConfigurationError(AlphabarError):
    """Raised for invalid configuration values (e.g. negative min_records)."""

    def __init__(
        self, message: str, setting: str | None = None, original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)
        self.setting = setting


class TableNotFoundError(AlphabarError):
    """Raised when the DynamoDB table does not exist."""

    def __init__(self, table_name: str, original_error: Exception | None = None) -> None:
        super().__init__(f"Table '{table_name}' not found", original_error)
        self.table_name = table_name


class ProvisionedThroughputExceededError(AlphabarError):
    """Raised when DynamoDB throttles requests."""

    def __init__(
        self, message: str = "Request rate exceeded", original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)


class RequestTimeoutError(AlphabarError):
    """Raised when a request to DynamoDB times out."""

    def __init__(
        self, message: str = "Request timed out", original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)


class ValidationError(AlphabarError):
    """Raised for request validation errors from DynamoDB (e.g. a malformed filter)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.field = field
        self.value = value


class DynamoSerializationError(AlphabarError):
    """Raised when serialization to DynamoDB format fails (e.g. unsupported type)."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message, original_error)


@contextmanager
def handle_dynamo_errors(table_name: str | None = None) -> Generator[None, None, None]:
    """
    Context manager that catches botocore.exceptions.ClientError
    and raises the appropriate AlphabarError subclass.

    Args:
        table_name: Optional table name for better error messages

    Usage:
        with handle_dynamo_errors(table_name="people"):
            client.scan(...)
    """
    try:
        yield
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "Unknown")
        error_message = e.response.get("Error", {}).get("Message", str(e))

        if error_code == "ResourceNotFoundException":
            raise TableNotFoundError(table_name=table_name or "unknown", original_error=e) from e

        if error_code in (
            "ProvisionedThroughputExceededException",
            "ThrottlingException",
            "RequestLimitExceeded",
        ):
            raise ProvisionedThroughputExceededError(message=error_message, original_error=e) from e

        if error_code in ("ValidationException", "SerializationException"):
            raise ValidationError(message=error_message, original_error=e) from e

        if error_code in ("RequestTimeout", "RequestTimeoutException"):
            raise RequestTimeoutError(message=error_message, original_error=e) from e

        # Unknown error: wrap in generic AlphabarError
        raise AlphabarError(
            message=f"DynamoDB error ({error_code}): {error_message}", original_error=e
        ) from e
