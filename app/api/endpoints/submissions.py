"""Form submission endpoints for the intake API.

This module contains the FastAPI routes for the contact, consultation and
project inquiry forms. No authentication is required.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Request, Response, status

from app.core.config import settings
from app.core.exceptions import IntakeError, MethodError, UnexpectedError
from app.models.submission import ErrorResponse, SubmissionResponse
from app.services.form_definitions import get_form
from app.services.submission_service import submission_service

logger = logging.getLogger(__name__)

router = APIRouter()

# Every method is routed here so preflight and wrong-method requests get the
# same JSON error shape as the rest of the pipeline.
SUBMISSION_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_405_METHOD_NOT_ALLOWED: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


async def handle_submission(
    form_name: str, request: Request, background_tasks: BackgroundTasks
):
    """
    Run the request state machine for one form family.

    Preflight requests are answered immediately, other non-POST methods are
    rejected, and POST bodies go through the submission pipeline.

    Raises:
        MethodError: If the method is not POST or OPTIONS
        IntakeError: Any pipeline failure, rendered by the app's handler
        UnexpectedError: For any other failure
    """
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=settings.CORS_HEADERS)

    if request.method != "POST":
        raise MethodError()

    form = get_form(form_name)
    try:
        body = await request.body()
        payload = submission_service.parse_payload(body)
        return await submission_service.submit(form, payload, background_tasks)
    except IntakeError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error processing {form_name} submission: {str(e)}")
        raise UnexpectedError() from e


@router.api_route(
    "/submit-contact",
    methods=SUBMISSION_METHODS,
    response_model=SubmissionResponse,
    responses=ERROR_RESPONSES,
    summary="Submit contact form",
    description="Store a contact message and email the sender a confirmation.",
)
async def submit_contact(request: Request, background_tasks: BackgroundTasks):
    return await handle_submission("contact", request, background_tasks)


@router.api_route(
    "/submit-consultation",
    methods=SUBMISSION_METHODS,
    response_model=SubmissionResponse,
    responses=ERROR_RESPONSES,
    summary="Book a consultation",
    description=(
        "Store a consultation request, or a project inquiry when form_type is "
        "'inquiry', and email the requester a confirmation."
    ),
)
async def submit_consultation(request: Request, background_tasks: BackgroundTasks):
    return await handle_submission("consultation", request, background_tasks)


@router.api_route(
    "/submit-project-inquiry",
    methods=SUBMISSION_METHODS,
    response_model=SubmissionResponse,
    responses=ERROR_RESPONSES,
    summary="Submit project inquiry",
    description="Store a project inquiry and email the requester a confirmation.",
)
async def submit_project_inquiry(request: Request, background_tasks: BackgroundTasks):
    return await handle_submission("project-inquiry", request, background_tasks)
