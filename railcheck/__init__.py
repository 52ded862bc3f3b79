"""
railcheck - composable validators that report where things went wrong.

Usage:
    from railcheck import DictV, ListV, Required, Optional, String, validate

    schema = DictV({
        "name": Required(String()),
        "email": Optional(Email()),
        "tags": ListV(String()),
    })

    result = validate(data, schema)
    if result.is_err():
        print(format_errors(result.error))   # {"tags[1]": "Must be a string"}
"""

from .context import is_strict, validation_context
from .core import (
    DefaultV,
    DictV,
    FnV,
    ListV,
    Node,
    OptionalV,
    Parse,
    Pipe,
    RequiredV,
    V,
    compose,
    to_validator,
    validate,
)
from .decorator import validator
from .errors import ValidationFailed
from .formatting import format_errors, format_path
from .parsers import (
    NumberArray,
    ParseBool,
    ParseDate,
    ParseInteger,
    ParseISODate,
    ParseJSON,
    ParseNumber,
    ParsePhoneNumber,
    ParseString,
    ParseURL,
)
from .schema import to_pydantic
from .types import (
    ABSENT,
    Err,
    Ok,
    Path,
    ValidationError,
    Validator,
    combine,
    combine_all,
    is_err,
    is_ok,
)
from .union import Discriminated, Union, WithCommon
from .validators import (
    Between,
    BoolEquals,
    Boolean,
    DateRange,
    DivisibleBy,
    Email,
    Eq,
    ExactLength,
    FutureDate,
    Gt,
    Gte,
    InRange,
    InSet,
    Integer,
    IsFalse,
    IsType,
    Lt,
    Lte,
    Matches,
    Max,
    MaxItems,
    MaxLength,
    Min,
    MinItems,
    MinLength,
    MustBeChecked,
    Negative,
    NonEmpty,
    NonZero,
    NotEq,
    NullableBool,
    Number,
    OneOf,
    Optional,
    PastDate,
    Pattern,
    Positive,
    Precision,
    Predicate,
    Required,
    SelectionArray,
    String,
    StringEnum,
    TodayOrFuture,
    Url,
    WithDefault,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "is_ok",
    "is_err",
    "combine",
    "combine_all",
    "ABSENT",
    "Path",
    "ValidationError",
    "Validator",
    "ValidationFailed",
    # Core
    "Node",
    "V",
    "Parse",
    "FnV",
    "Pipe",
    "DictV",
    "ListV",
    "RequiredV",
    "OptionalV",
    "DefaultV",
    "compose",
    "to_validator",
    "validate",
    "validator",
    # Dispatch
    "Union",
    "Discriminated",
    "WithCommon",
    # Configuration
    "validation_context",
    "is_strict",
    # Formatting
    "format_errors",
    "format_path",
    # Validators
    "Required",
    "Optional",
    "WithDefault",
    "IsType",
    "Predicate",
    "InRange",
    "InSet",
    "OneOf",
    "Matches",
    "Eq",
    "NotEq",
    "Gt",
    "Gte",
    "Lt",
    "Lte",
    "Between",
    "String",
    "MinLength",
    "MaxLength",
    "ExactLength",
    "Pattern",
    "NonEmpty",
    "Email",
    "Url",
    "StringEnum",
    "Number",
    "Min",
    "Max",
    "Integer",
    "Positive",
    "Negative",
    "NonZero",
    "DivisibleBy",
    "Precision",
    "Boolean",
    "MustBeChecked",
    "IsFalse",
    "BoolEquals",
    "NullableBool",
    "DateRange",
    "PastDate",
    "FutureDate",
    "TodayOrFuture",
    "MinItems",
    "MaxItems",
    "SelectionArray",
    # Parsers
    "ParseNumber",
    "ParseInteger",
    "ParseBool",
    "ParseDate",
    "ParseISODate",
    "ParseString",
    "ParseJSON",
    "ParseURL",
    "ParsePhoneNumber",
    "NumberArray",
    # Schema
    "to_pydantic",
]
