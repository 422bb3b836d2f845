"""Validation service for form submissions.

Applies a FormSchema to a raw payload and returns a ValidationResult.
Expected validation failures are returned, never raised.
"""

import logging
import re
from typing import Any, Dict, Optional

from app.models.form_schema import FieldKind, FieldRule, FormSchema, ValidationResult
from app.utils.helper_functions import coerce_text

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ValidationService:
    """Validates flat form payloads against declarative schemas."""

    def __init__(self, strict: bool = False):
        """
        Args:
            strict: Also enforce client tier rules (client-required fields, length bounds, terms acceptance)
        """
        self.strict = strict

    def validate(self, schema: FormSchema, payload: Dict[str, Any]) -> ValidationResult:
        """Validate a payload against a form schema.

        Args:
            schema: The form's rule set
            payload: Flat mapping of field name to raw value

        Returns:
            ValidationResult holding the normalized record or per-field errors
        """
        result = ValidationResult()
        context = schema.context_for(payload)

        for rule in schema.fields:
            raw = payload.get(rule.name)
            if rule.kind == FieldKind.BOOLEAN:
                self._check_flag(rule, raw, result)
            else:
                self._check_text(rule, raw, context, result)

        if not result.accepted:
            logger.info(f"Rejected {schema.form} submission: {result.message}")
        return result

    def _check_flag(self, rule: FieldRule, raw: Any, result: ValidationResult) -> None:
        accepted = raw is True
        result.record[rule.name] = accepted
        if self.strict and rule.must_be_true and not accepted:
            result.errors[rule.name] = rule.message or f"You must accept the {rule.label.lower()}"

    def _check_text(
        self,
        rule: FieldRule,
        raw: Any,
        context: Dict[str, Any],
        result: ValidationResult,
    ) -> None:
        try:
            value = coerce_text(raw)
        except TypeError:
            result.record[rule.name] = None
            result.errors[rule.name] = f"{rule.label} must be text"
            return

        result.record[rule.name] = value
        if value is None:
            if rule.is_required(context) or (self.strict and rule.is_client_required(context)):
                result.errors[rule.name] = f"{rule.label} is required"
                result.missing.append(rule.name)
            return

        error = self._first_violation(rule, value)
        if error:
            result.errors[rule.name] = error
            if rule.email and error == "Invalid email format":
                result.invalid_email = True

    def _first_violation(self, rule: FieldRule, value: str) -> Optional[str]:
        if rule.choices and value not in rule.choices:
            return f"{rule.label} must be one of: {', '.join(rule.choices)}"
        if rule.email and not EMAIL_PATTERN.match(value):
            return "Invalid email format"
        if not self.strict:
            return None
        if rule.min_length is not None and len(value) < rule.min_length:
            return rule.message or f"{rule.label} must be at least {rule.min_length} characters"
        if rule.max_length is not None and len(value) > rule.max_length:
            return rule.message or f"{rule.label} must be less than {rule.max_length} characters"
        return None
