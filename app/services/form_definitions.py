"""Form definitions driving the submission pipeline.

Each form family bundles its schema, target table, row builder, email
template and user-facing messages. The pipeline in submission_service is
generic over these definitions.
"""

from typing import Any, Dict

from pydantic import BaseModel

from app.models.form_schema import FieldKind, FieldRule, FormSchema, FormType
from app.models.submission import PROJECT_INQUIRY_MARKER, ConsultationRow, ContactRow
from app.utils.helper_functions import remove_null_values


def _contact_person_fields() -> list:
    return [
        FieldRule(name="full_name", label="Name", required=True, max_length=100),
        FieldRule(name="email", label="Email", required=True, email=True, max_length=255),
        FieldRule(name="company", label="Company name", client_required=True, max_length=100),
        FieldRule(name="phone", label="Phone number", required=True, max_length=20),
        FieldRule(name="service", label="Service", required=True),
    ]


TERMS_RULE = FieldRule(
    name="terms_accepted",
    label="Terms and conditions",
    kind=FieldKind.BOOLEAN,
    must_be_true=True,
    message="You must accept the terms and conditions",
)


class FormDefinition:
    """Base form definition. Subclasses describe one form family."""

    name: str = ""
    table: str = ""
    template_name: str = ""
    email_subject: str = ""
    success_message: str = ""
    failure_message: str = "Failed to submit form"
    schema: FormSchema

    def build_row(self, record: Dict[str, Any]) -> BaseModel:
        """Map a validated record onto the table's columns."""
        raise NotImplementedError(f"{type(self).__name__}.build_row not implemented")

    def recipient(self, row: Dict[str, Any]) -> str:
        return row["email"]

    def subject_for(self, row: Dict[str, Any], company: str) -> str:
        return self.email_subject.format(company=company)

    def success_message_for(self, row: Dict[str, Any]) -> str:
        return self.success_message

    def email_context(self, row: Dict[str, Any]) -> Dict[str, Any]:
        return {"name": row.get("full_name") or row.get("name")}


class ContactForm(FormDefinition):
    name = "contact"
    table = "contacts"
    template_name = "contact_confirmation.html"
    email_subject = "Thank you for contacting {company}"
    success_message = "Contact form submitted successfully"
    failure_message = "Failed to submit contact form"
    schema = FormSchema(
        form="contact",
        fields=[
            FieldRule(name="name", label="Name", required=True, max_length=100),
            FieldRule(name="email", label="Email", required=True, email=True, max_length=255),
            FieldRule(name="message", label="Message", required=True, max_length=1000),
        ],
    )

    def build_row(self, record: Dict[str, Any]) -> ContactRow:
        return ContactRow(name=record["name"], email=record["email"], message=record["message"])

    def email_context(self, row: Dict[str, Any]) -> Dict[str, Any]:
        return {"name": row["name"], "message": row["message"]}


class ConsultationForm(FormDefinition):
    """Consultation booking. Also accepts inquiries through `form_type`."""

    name = "consultation"
    table = "consultations"
    template_name = "consultation_confirmation.html"
    email_subject = "Thank you for requesting a consultation with {company}"
    success_message = "Consultation request submitted successfully"
    failure_message = "Failed to submit consultation request"
    schema = FormSchema(
        form="consultation",
        defaults={"form_type": FormType.CONSULTATION.value},
        fields=_contact_person_fields()
        + [
            FieldRule(
                name="form_type",
                label="Form type",
                choices=[form_type.value for form_type in FormType],
            ),
            FieldRule(
                name="consultation_type",
                label="Consultation type",
                required_when={"form_type": FormType.CONSULTATION.value},
            ),
            FieldRule(
                name="preferred_date",
                label="Preferred date",
                client_required_when={"form_type": FormType.CONSULTATION.value},
            ),
            FieldRule(
                name="preferred_time",
                label="Preferred time",
                client_required_when={"form_type": FormType.CONSULTATION.value},
            ),
            FieldRule(
                name="project_description",
                label="Project description",
                required_when={"form_type": FormType.INQUIRY.value},
            ),
            FieldRule(
                name="project_budget",
                label="Project budget",
                client_required_when={"form_type": FormType.INQUIRY.value},
            ),
            FieldRule(
                name="project_timeline",
                label="Project timeline",
                client_required_when={"form_type": FormType.INQUIRY.value},
            ),
            FieldRule(name="contact_method", label="Preferred contact method"),
            FieldRule(name="additional_information", label="Message", max_length=500),
            TERMS_RULE,
        ],
    )

    def build_row(self, record: Dict[str, Any]) -> ConsultationRow:
        form_type = FormType(record.get("form_type") or FormType.CONSULTATION)
        consultation_type = record.get("consultation_type")
        if form_type == FormType.INQUIRY and not consultation_type:
            consultation_type = PROJECT_INQUIRY_MARKER
        return ConsultationRow(
            full_name=record["full_name"],
            email=record["email"],
            company=record.get("company"),
            phone=record["phone"],
            service=record["service"],
            consultation_type=consultation_type,
            preferred_date=record.get("preferred_date"),
            preferred_time=record.get("preferred_time"),
            project_description=record.get("project_description"),
            project_budget=record.get("project_budget"),
            project_timeline=record.get("project_timeline"),
            contact_method=record.get("contact_method"),
            additional_information=record.get("additional_information"),
            form_type=form_type,
        )

    @staticmethod
    def is_consultation(row: Dict[str, Any]) -> bool:
        return row.get("form_type", FormType.CONSULTATION.value) == FormType.CONSULTATION.value

    def subject_for(self, row: Dict[str, Any], company: str) -> str:
        if self.is_consultation(row):
            return self.email_subject.format(company=company)
        return ProjectInquiryForm.email_subject.format(company=company)

    def success_message_for(self, row: Dict[str, Any]) -> str:
        if self.is_consultation(row):
            return self.success_message
        return ProjectInquiryForm.success_message

    def email_context(self, row: Dict[str, Any]) -> Dict[str, Any]:
        is_consultation = self.is_consultation(row)
        details = remove_null_values(
            {
                "Service": row.get("service"),
                "Consultation Type": row.get("consultation_type") if is_consultation else None,
                "Preferred Date": row.get("preferred_date"),
                "Preferred Time": row.get("preferred_time"),
                "Company": row.get("company"),
                "Project Description": row.get("project_description"),
                "Project Budget": row.get("project_budget"),
                "Project Timeline": row.get("project_timeline"),
                "Additional Information": row.get("additional_information"),
            }
        )
        return {
            "name": row["full_name"],
            "is_consultation": is_consultation,
            "details": details,
        }


class ProjectInquiryForm(FormDefinition):
    name = "project-inquiry"
    table = "consultations"
    template_name = "project_inquiry_confirmation.html"
    email_subject = "Thank you for your project inquiry with {company}"
    success_message = "Project inquiry submitted successfully"
    failure_message = "Failed to submit project inquiry"
    schema = FormSchema(
        form="project-inquiry",
        fields=_contact_person_fields()
        + [
            FieldRule(
                name="project_description",
                label="Project description",
                required=True,
                min_length=10,
                max_length=2000,
            ),
            FieldRule(name="project_budget", label="Project budget", client_required=True),
            FieldRule(name="project_timeline", label="Project timeline", client_required=True),
            FieldRule(name="contact_method", label="Preferred contact method", client_required=True),
            FieldRule(name="additional_information", label="Additional information"),
            TERMS_RULE,
        ],
    )

    def build_row(self, record: Dict[str, Any]) -> ConsultationRow:
        return ConsultationRow(
            full_name=record["full_name"],
            email=record["email"],
            company=record.get("company"),
            phone=record["phone"],
            service=record["service"],
            consultation_type=PROJECT_INQUIRY_MARKER,
            project_description=record["project_description"],
            project_budget=record.get("project_budget"),
            project_timeline=record.get("project_timeline"),
            contact_method=record.get("contact_method"),
            additional_information=record.get("additional_information"),
            form_type=FormType.INQUIRY,
        )

    def email_context(self, row: Dict[str, Any]) -> Dict[str, Any]:
        details = remove_null_values(
            {
                "Service": row.get("service"),
                "Project Description": row.get("project_description"),
                "Company": row.get("company"),
                "Project Budget": row.get("project_budget"),
                "Project Timeline": row.get("project_timeline"),
                "Preferred Contact Method": row.get("contact_method"),
                "Additional Information": row.get("additional_information"),
            }
        )
        return {"name": row["full_name"], "details": details}


FORMS: Dict[str, FormDefinition] = {
    form.name: form for form in (ContactForm(), ConsultationForm(), ProjectInquiryForm())
}


def get_form(name: str) -> FormDefinition:
    """Look up a form definition by family name.

    Raises:
        KeyError: If no form family has that name
    """
    return FORMS[name]
