"""
Form API Endpoints

Structural validation of the journal's forms, field by field.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException

from tradejournal.schemas.validation import SchemaValidationResult
from tradejournal.services.forms import FORMS, get_form_schema, validate_form

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def list_forms():
    """Names of the forms that can be validated."""
    return {"forms": sorted(FORMS)}


@router.post("/{form_name}/validate", response_model=SchemaValidationResult)
async def check_form(form_name: str, data: dict[str, Any] = Body(...)):
    """
    Validate raw form values.

    Errors carry the field path to highlight, e.g. ["planned_tps", 0, "price"].
    """
    try:
        schema = get_form_schema(form_name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown form: {form_name}")

    result = validate_form(schema, data)
    if not result.valid:
        logger.warning(f"{form_name} form rejected: {[e.field for e in result.errors]}")
    return result
