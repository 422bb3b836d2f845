"""Declarative form schema models.

A form schema is a list of field rules shared by the server and the client
form UI. Rules belong to one of two tiers:

- server tier: presence of required fields, the coarse email shape, value
  types and allowed choices. Always enforced.
- client tier: presence of client-required fields, length bounds and terms
  acceptance. Always published, enforced on the server only in strict mode.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from typing_extensions import Annotated
from pydantic import BaseModel, Field


class FieldKind(str, Enum):
    TEXT = "text"
    BOOLEAN = "boolean"


class FormType(str, Enum):
    CONSULTATION = "consultation"
    INQUIRY = "inquiry"


class FieldRule(BaseModel):
    """Validation rules for a single form field.

    Attributes:
        name: Payload key of the field
        label: Human readable name used in messages
        kind: Whether the field carries text or a boolean flag
        required: Field must be present and non-blank
        required_when: Field is required only when every listed context key has the given value
        client_required: Client tier presence rule
        client_required_when: Client tier presence rule, conditional like required_when
        email: Value must look like local@domain.tld
        choices: Allowed values, if restricted
        min_length: Client tier minimum length
        max_length: Client tier maximum length
        must_be_true: Client tier acceptance flag
        message: Override for the client tier message
    """
    name: Annotated[str, Field(..., description="Payload key of the field")]
    label: Annotated[str, Field(..., description="Human readable field name")]
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    required_when: Annotated[
        Optional[Dict[str, str]],
        Field(None, description="Context values under which the field becomes required"),
    ]
    client_required: bool = False
    client_required_when: Optional[Dict[str, str]] = None
    email: bool = False
    choices: Optional[List[str]] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    must_be_true: bool = False
    message: Optional[str] = None

    def is_required(self, context: Dict[str, Any]) -> bool:
        if self.required:
            return True
        return self._matches(self.required_when, context)

    def is_client_required(self, context: Dict[str, Any]) -> bool:
        if self.client_required:
            return True
        return self._matches(self.client_required_when, context)

    @staticmethod
    def _matches(conditions: Optional[Dict[str, str]], context: Dict[str, Any]) -> bool:
        if not conditions:
            return False
        return all(context.get(key) == value for key, value in conditions.items())


class FormSchema(BaseModel):
    """Ordered rule set for one form family.

    Attributes:
        form: Form family name (contact, consultation, project-inquiry)
        fields: Field rules in display order
        defaults: Context defaults used to resolve conditional rules
    """
    form: str
    fields: List[FieldRule]
    defaults: Dict[str, str] = Field(default_factory=dict)

    def context_for(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Resolve the discriminator values used by conditional rules."""
        context = dict(self.defaults)
        for key in self.defaults:
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                context[key] = value.strip()
        return context


class ValidationResult(BaseModel):
    """Outcome of validating a payload against a form schema.

    Attributes:
        record: Normalized values for every schema field, blanks dropped to None
        errors: Field name to first violated rule's message
        missing: Required fields that were absent or blank, in schema order
        invalid_email: Whether an email field failed the shape check
    """
    record: Dict[str, Any] = Field(default_factory=dict)
    errors: Dict[str, str] = Field(default_factory=dict)
    missing: List[str] = Field(default_factory=list)
    invalid_email: bool = False

    @property
    def accepted(self) -> bool:
        return not self.errors

    @property
    def message(self) -> Optional[str]:
        """Single combined message for the server response."""
        if self.missing:
            return f"Missing required fields: {', '.join(self.missing)}"
        if self.invalid_email:
            return "Invalid email format"
        if self.errors:
            return next(iter(self.errors.values()))
        return None


class FormSchemaResponse(BaseModel):
    """Published schema of a form, consumed by the client form UI."""
    form: str
    strict: Annotated[bool, Field(..., description="Whether the server enforces client tier rules")]
    fields: List[FieldRule]
