"""
Form Schema Layer

CONTRACT:
    Input:  raw form values + optional translator
    Output: SchemaValidationResult

Gates the numeric engine: nothing reaches the calculators before the
structural checks of its form pass.
"""

from tradejournal.services.forms.validator import FORMS, get_form_schema, validate_form

__all__ = [
    "FORMS",
    "get_form_schema",
    "validate_form",
]
