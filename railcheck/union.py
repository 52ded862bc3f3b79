"""
Polymorphic dispatch: Union, Discriminated and WithCommon.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from .core import Node, _collect, fail, to_validator
from .types import Err, Ok, Outcome, Path, ValidationError, ValidationErrors, Validator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Union(Node):
    """
    Try validators in order and return the first success.

    When every candidate fails:
        collect_all_errors=True   every candidate's errors, in candidate order
        collect_all_errors=False  only the first candidate's errors; the
                                  remaining candidates are not tried

    Usage:
        Union((String(), Number()))
        String() | Number()                  # Same thing
        Union((text_schema, image_schema), error_prefix="Invalid message")
    """

    validators: tuple[Validator, ...]
    collect_all_errors: bool = True
    error_prefix: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "validators", tuple(to_validator(v) for v in self.validators)
        )

    def __call__(self, value: Any, path: Path) -> Outcome:
        if not self.validators:
            return fail(path, "No validators provided to union")

        errors: ValidationErrors = []

        for validator in self.validators:
            result = validator(value, path)
            if isinstance(result, Ok):
                return result

            _collect(errors, result.error, path)

            if not self.collect_all_errors:
                break

        logger.debug("no union candidate matched at %r", path)

        if self.error_prefix:
            errors = [
                ValidationError(e.path, f"{self.error_prefix}: {e.message}")
                for e in errors
            ]

        return Err(errors)


@dataclass(frozen=True, slots=True)
class Discriminated(Node):
    """
    Pick exactly one validator by the value of a tag field.

    The whole input (tag included) is handed to the selected validator at
    the unchanged path, so variant schemas normally declare the tag field
    themselves.

    Usage:
        message = Discriminated("type", {
            "text": DictV({"type": StringEnum(["text"]), "content": String()}),
            "image": DictV({"type": StringEnum(["image"]), "url": Url()}),
        })
    """

    field: str
    variants: Mapping[str, Validator]
    fallback_message: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.field, str):
            raise TypeError("Discriminant field name must be a string")
        variants = {k: to_validator(v) for k, v in self.variants.items()}
        object.__setattr__(self, "variants", MappingProxyType(variants))

    def __call__(self, value: Any, path: Path) -> Outcome:
        if not isinstance(value, Mapping):
            return fail(path, "Expected an object")

        tag_path = (*path, self.field)
        tag = value.get(self.field)

        if not isinstance(tag, str):
            return fail(
                tag_path, f"Missing or invalid discriminant field '{self.field}'"
            )

        validator = self.variants.get(tag)
        if validator is None:
            logger.debug("unknown discriminant %r at %r", tag, tag_path)
            fallback = (
                self.fallback_message
                or f"Invalid discriminant value for '{self.field}'"
            )
            return fail(tag_path, f"{fallback}: '{tag}'")

        return validator(value, path)


@dataclass(frozen=True, slots=True)
class WithCommon(Node):
    """
    Validate fields shared by every variant, then the variant itself, and
    merge both outputs. On key collisions the variant's value wins.

    Both sides see the whole input, so a strict DictV on either side reports
    the other side's keys as unexpected. Build common and variant schemas with
    strict=False, or have each one declare the other's keys.

    Usage:
        WithCommon(
            DictV({"id": String(), "type": String()}, strict=False),
            Discriminated("type", {
                "text": DictV({"type": String(), "content": String()}, strict=False),
            }),
        )
    """

    common: Validator
    variant: Validator

    def __post_init__(self) -> None:
        object.__setattr__(self, "common", to_validator(self.common))
        object.__setattr__(self, "variant", to_validator(self.variant))

    def __call__(self, value: Any, path: Path) -> Outcome:
        common = self.common(value, path)
        if isinstance(common, Err):
            return common

        variant = self.variant(value, path)
        if isinstance(variant, Err):
            return variant

        if not isinstance(common.value, Mapping) or not isinstance(
            variant.value, Mapping
        ):
            return fail(path, "Expected an object")

        return Ok({**common.value, **variant.value})
