from decimal import Decimal
from typing import Any, cast

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from .exceptions import DynamoSerializationError


class DynamoSerializer:
    """
    Handles the conversion between Python values and DynamoDB Low-Level format.

    Architectural Note:
    -------------------
    The low-level client speaks typed JSON ({"S": "..."}, {"N": "..."}).
    Filter values go out through to_dynamo_value; scanned items come back
    through from_dynamo, with Decimals restored to int/float so pydantic
    models validate cleanly.
    """

    def __init__(self) -> None:
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    def to_dynamo_value(self, value: str) -> dict[str, Any]:
        """
        Serializes a filter value to DynamoDB format.
        Predicates only ever compare against strings: "A" -> {'S': 'A'}
        """
        if not isinstance(value, str):
            raise DynamoSerializationError(
                f"Failed to serialize value '{value}'. error=filter values must be strings"
            )
        return cast(dict[str, Any], self._serializer.serialize(value))

    def from_dynamo(self, item: dict[str, Any]) -> dict[str, Any]:
        """Converts DynamoDB JSON format back to standard Python dict."""
        python_data = {k: self._deserializer.deserialize(v) for k, v in item.items()}
        result = self._restore_to_python(python_data)
        assert isinstance(result, dict)
        return result

    def _restore_to_python(self, value: Any) -> Any:
        """
        Recursively restores DynamoDB values to Python-friendly types.

        Converts:
        - Decimal -> int (if whole number) or float
        """
        if isinstance(value, Decimal):
            if value % 1 == 0:
                return int(value)
            return float(value)
        if isinstance(value, list):
            return [self._restore_to_python(v) for v in value]
        if isinstance(value, dict):
            return {k: self._restore_to_python(v) for k, v in value.items()}
        return value
