from fastapi import APIRouter, HTTPException, status

from app.models.form_schema import FormSchemaResponse
from app.services.form_definitions import get_form
from app.services.submission_service import submission_service

router = APIRouter()


@router.get(
    "/{form_name}/schema",
    response_model=FormSchemaResponse,
    status_code=status.HTTP_200_OK,
    summary="Get form schema",
    description="Validation rules of a form, shared with the client form UI.",
)
async def get_form_schema(form_name: str) -> FormSchemaResponse:
    """
    Publish the rule set of a form family.

    Raises:
        HTTPException: If the form family does not exist
    """
    try:
        form = get_form(form_name)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown form: {form_name}")

    return FormSchemaResponse(
        form=form.schema.form,
        strict=submission_service.validator.strict,
        fields=form.schema.fields,
    )
