"""
Filter predicates handed to record sources.

A resolution produces one of three filters:
- None: match every record (bucketing bypassed)
- StartsWith(field, letter): case-insensitive prefix match
- BlankOrNull(field): field is the empty string or null/missing

Predicates are plain values. Each source decides how to evaluate them:
InMemorySource calls .matches(), DynamoSource compiles them to a
FilterExpression through boto3's ConditionExpressionBuilder.

Usage:
    from alphabar.predicates import StartsWith

    predicate = StartsWith("last_name", "S")
    predicate.matches("smith")  # True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from boto3.dynamodb.conditions import Attr as Boto3Attr
from boto3.dynamodb.conditions import ConditionBase as Boto3ConditionBase

from .groups import Group, group_of

if TYPE_CHECKING:
    from .serializer import DynamoSerializer


@dataclass(frozen=True)
class StartsWith:
    """
    Matches records whose field value starts with a letter, ignoring case.

    Attributes:
        field: Attribute name
        letter: Single upper-case letter A-Z
    """

    field: str
    letter: str

    def __post_init__(self) -> None:
        group = Group.parse(self.letter)
        if group is None or not group.is_letter:
            raise ValueError(f"StartsWith expects a single letter A-Z, got {self.letter!r}")
        # Frozen dataclass: store the canonical upper-case form
        object.__setattr__(self, "letter", group.value)

    def matches(self, value: Any) -> bool:
        return group_of(value) is Group(self.letter)

    def to_condition(self) -> Boto3ConditionBase:
        """
        DynamoDB begins_with is case-sensitive, so both cases are OR'ed.
        """
        attr = Boto3Attr(self.field)
        return attr.begins_with(self.letter) | attr.begins_with(self.letter.lower())


@dataclass(frozen=True)
class BlankOrNull:
    """
    Matches records whose field is "", null, or missing entirely.

    Attributes:
        field: Attribute name
    """

    field: str

    def matches(self, value: Any) -> bool:
        return group_of(value) is Group.Blank

    def to_condition(self) -> Boto3ConditionBase:
        attr = Boto3Attr(self.field)
        return attr.not_exists() | attr.eq("") | attr.attribute_type("NULL")


# Type alias for the filter argument of RecordFilter.filter (None matches everything)
Predicate = Union[StartsWith, BlankOrNull]


def predicate_for(field: str, group: Group) -> Predicate | None:
    """
    Builds the predicate selecting a group's records.

    Returns None for Group.All, which is the unfiltered set.
    """
    if group is Group.All:
        return None
    if group is Group.Blank:
        return BlankOrNull(field)
    return StartsWith(field, group.value)


def compile_predicate(
    predicate: Predicate,
    serializer: DynamoSerializer,
) -> dict[str, Any]:
    """
    Compiles a predicate into DynamoDB Scan filter parameters.

    Uses boto3's ConditionExpressionBuilder to generate:
    - FilterExpression (string)
    - ExpressionAttributeNames (dict)
    - ExpressionAttributeValues (dict)

    Args:
        predicate: A StartsWith or BlankOrNull predicate
        serializer: DynamoSerializer for converting values to DynamoDB format

    Returns:
        Dict with FilterExpression, and optionally ExpressionAttributeNames
        and ExpressionAttributeValues (only included if non-empty)
    """
    from boto3.dynamodb.conditions import ConditionExpressionBuilder

    if not isinstance(predicate, (StartsWith, BlankOrNull)):
        raise TypeError(f"Expected StartsWith or BlankOrNull, got {type(predicate).__name__}")

    # Handles reserved keywords ("name", "status") and placeholder generation
    builder = ConditionExpressionBuilder()
    expression = builder.build_expression(predicate.to_condition(), is_key_condition=False)

    result: dict[str, Any] = {
        "FilterExpression": expression.condition_expression,
    }

    if expression.attribute_name_placeholders:
        result["ExpressionAttributeNames"] = dict(expression.attribute_name_placeholders)

    # boto3's builder uses placeholder names like :v0, :v1; values still
    # need the low-level DynamoDB format ({"S": "..."})
    if expression.attribute_value_placeholders:
        serialized_values = {}
        for placeholder, value in expression.attribute_value_placeholders.items():
            serialized_values[placeholder] = serializer.to_dynamo_value(value)
        result["ExpressionAttributeValues"] = serialized_values

    return result
