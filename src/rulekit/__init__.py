"""rulekit — composable value-level validation rules.

Build rules once with the factories and combinators, then call them
with a value. A rule returns ``VALID`` (``True``) or an error message::

    >>> from rulekit import dig, numericality, presence
    >>> rule = dig(["nested", "value"], [presence(), numericality(min=0)])
    >>> rule({"nested": {"value": -1}})
    'must be greater or equal 0'
    >>> rule({"nested": {"value": 1}})
    True
"""

from rulekit.combinators import all_of, dig, every, or_
from rulekit.errors import RuleConfigError
from rulekit.messages import interpolate
from rulekit.rules import format, inclusion, length, numericality, presence, type_of
from rulekit.types import VALID, Rule, RuleResult, RuleSet, is_valid
from rulekit.values import (
    ABSENT,
    TypeName,
    Value,
    is_array,
    is_blank,
    is_boolean,
    is_defined,
    is_integer,
    is_number,
    is_object,
    is_string,
    is_type,
)

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "VALID",
    "Rule",
    "RuleConfigError",
    "RuleResult",
    "RuleSet",
    "TypeName",
    "Value",
    "all_of",
    "dig",
    "every",
    "format",
    "inclusion",
    "interpolate",
    "is_array",
    "is_blank",
    "is_boolean",
    "is_defined",
    "is_integer",
    "is_number",
    "is_object",
    "is_string",
    "is_type",
    "is_valid",
    "length",
    "numericality",
    "or_",
    "presence",
    "type_of",
]
