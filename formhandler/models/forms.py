"""Form-related Pydantic models"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Dict, List, Optional


# Payload keys that are not form data when rendering notifications
RESERVED_FIELD_NAMES = ("redirect", "ip_address", "ipAddress", "ip", "system")


class DerivationMethod(str, Enum):
    """Server-side sources for derived field values"""
    CLIENT_IP = "client-ip"
    USER_AGENT_SUMMARY = "user-agent-summary"


class FieldSpec(BaseModel):
    """Declared field of a form"""
    model_config = ConfigDict(frozen=True)

    label: Optional[str] = None
    required: bool = False
    honeypot: bool = False
    method: Optional[DerivationMethod] = None


class FormDefinition(BaseModel):
    """Form configuration: where submissions go and which fields are accepted"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str
    to: List[EmailStr]
    bcc: List[EmailStr] = []
    sender: str = Field(..., alias="from", description="Sender template, e.g. `{email}`")
    subject: str = Field(..., description="Subject template, e.g. `Contact from {name}`")
    fields: Dict[str, FieldSpec]

    @field_validator("to", "bcc", mode="before")
    @classmethod
    def _as_list(cls, value):
        if isinstance(value, str):
            return [value]
        return value

    @property
    def destination_addresses(self) -> List[str]:
        """`to` and `bcc` recipients combined"""
        return [*self.to, *self.bcc]

    def field_label(self, name: str) -> str:
        return self.fields[name].label or name


class ValidatedField(BaseModel):
    """A declared field with its final (trimmed or derived) value"""
    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    value: str

    @property
    def is_reserved(self) -> bool:
        return self.name in RESERVED_FIELD_NAMES


class ValidationResult(BaseModel):
    """Validated fields in declaration order plus per-field error messages"""
    fields: List[ValidatedField] = []
    errors: Dict[str, List[str]] = {}

    @property
    def is_valid(self) -> bool:
        return not self.errors


class SubmissionResponse(BaseModel):
    """JSON body returned to API clients"""
    success: bool
    reason: Optional[List[str]] = None
    errors: Optional[Dict[str, List[str]]] = None
