"""
Form Schema Validation

Generic evaluation of the declarative form schemas: per-field constraints
first, then the cross-field refinements, each error attached to the exact
field path that should be highlighted.
"""

import logging
from typing import Any, Mapping, Optional, Type, Union

from pydantic import ValidationError as PydanticValidationError

from tradejournal.core.messages import Translator, render
from tradejournal.schemas.forms import (
    CalculatorForm,
    FormSchema,
    SettingsForm,
    TradeForm,
)
from tradejournal.schemas.validation import FieldError, SchemaValidationResult

logger = logging.getLogger(__name__)

FORMS: dict[str, Type[FormSchema]] = {
    "trade": TradeForm,
    "calculator": CalculatorForm,
    "settings": SettingsForm,
}


def get_form_schema(name: str) -> Type[FormSchema]:
    """Look up a form schema by name. Raises KeyError for unknown forms."""
    return FORMS[name]


def _message_path(loc: tuple[Union[str, int], ...]) -> str:
    """'planned_tps.0.price' -> 'planned_tps.price' (row indices dropped)."""
    return ".".join(str(part) for part in loc if not isinstance(part, int))


def _field_error(
    schema: Type[FormSchema],
    error: Mapping[str, Any],
    translate: Optional[Translator],
) -> FieldError:
    loc = tuple(error["loc"])
    code = error["type"]
    key = schema.field_messages.get(_message_path(loc), {}).get(code)
    if key is None and code == "missing":
        key = "validations.required"

    message = render(key, translate) if key else error["msg"]
    return FieldError(path=list(loc), code=code, message=message, key=key)


def validate_form(
    schema: Type[FormSchema],
    data: Mapping[str, Any],
    translate: Optional[Translator] = None,
) -> SchemaValidationResult:
    """
    Evaluate a form schema against raw form input.

    Refinements only run once every per-field check passed, since they
    compare fields that must already be well-formed.

    Args:
        schema: One of the FormSchema subclasses
        data: Raw form values keyed by field name
        translate: Optional translation collaborator

    Returns:
        SchemaValidationResult with every error found
    """
    try:
        form = schema.model_validate(data)
    except PydanticValidationError as e:
        errors = [_field_error(schema, err, translate) for err in e.errors()]
        logger.debug(f"{schema.__name__}: {len(errors)} field error(s)")
        return SchemaValidationResult(valid=False, errors=errors)

    errors = [
        FieldError(
            path=list(rule.target),
            code="refinement",
            message=render(rule.message_key, translate),
            key=rule.message_key,
        )
        for rule in schema.refinements
        if not rule.check(form)
    ]
    return SchemaValidationResult(valid=not errors, errors=errors)
