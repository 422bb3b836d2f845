"""Submission models for the intake API.

This module contains the Pydantic models for persisted form rows and the
responses returned to the client form UI.
"""

from typing import Any, Dict, List, Optional
from typing_extensions import Annotated
from pydantic import BaseModel, Field, ConfigDict

from app.models.form_schema import FormType

PROJECT_INQUIRY_MARKER = "project_inquiry"


class ContactRow(BaseModel):
    """Row written to the `contacts` table.

    Attributes:
        name: Full name of the person getting in touch
        email: Address the agency replies to
        message: Free text message
    """
    name: Annotated[str, Field(..., description="Full name of the person getting in touch")]
    email: Annotated[str, Field(..., description="Address the agency replies to")]
    message: Annotated[str, Field(..., description="Free text message")]


class ConsultationRow(BaseModel):
    """Row written to the `consultations` table.

    Consultations and project inquiries share the table and are told apart by
    `form_type` and `consultation_type`.
    """
    full_name: str
    email: str
    company: Optional[str] = None
    phone: str
    service: str
    consultation_type: Annotated[
        str,
        Field(..., description=f"Meeting format, or '{PROJECT_INQUIRY_MARKER}' for inquiries"),
    ]
    preferred_date: Optional[str] = None
    preferred_time: Optional[str] = None
    project_description: Optional[str] = None
    project_budget: Optional[str] = None
    project_timeline: Optional[str] = None
    contact_method: Optional[str] = None
    additional_information: Optional[str] = None
    form_type: FormType = FormType.CONSULTATION

    model_config = ConfigDict(use_enum_values=True, validate_default=True)


class SubmissionResponse(BaseModel):
    """Response model for accepted submissions.

    Attributes:
        success: Always true for accepted submissions
        message: Confirmation message for the user
        data: Inserted rows as returned by the store, including generated ids
    """
    success: bool = Field(..., description="Whether the submission was stored")
    message: str = Field(..., description="Confirmation message for the user")
    data: List[Dict[str, Any]] = Field(default_factory=list, description="Inserted rows")


class ErrorResponse(BaseModel):
    """Response model for rejected submissions."""
    error: str = Field(..., description="Human readable reason")
    errors: Optional[Dict[str, str]] = Field(None, description="Per-field messages for validation failures")
