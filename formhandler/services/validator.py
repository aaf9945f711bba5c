"""Form field validation"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from user_agents import parse as parse_user_agent

from formhandler.models.events import RequestPayload
from formhandler.models.forms import (
    DerivationMethod,
    FieldSpec,
    FormDefinition,
    ValidatedField,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def get_ip_address(headers: httpx.Headers) -> str:
    """Client address from the first `X-Forwarded-For` entry"""
    forwarded = headers.get("x-forwarded-for", "")
    return forwarded.split(",")[0].strip()


def get_system_details(headers: httpx.Headers) -> str:
    """Browser and OS summary parsed from the `User-Agent` header"""
    user_agent = headers.get("user-agent", "").strip()
    if not user_agent:
        return ""

    agent = parse_user_agent(user_agent)
    browser = f"{agent.browser.family} {agent.browser.version_string}".strip()
    system = f"{agent.os.family} {agent.os.version_string}".strip()
    return f"{browser} / {system}"


def derive_value(method: DerivationMethod, headers: httpx.Headers) -> str:
    if method is DerivationMethod.CLIENT_IP:
        return get_ip_address(headers)
    if method is DerivationMethod.USER_AGENT_SUMMARY:
        return get_system_details(headers)
    raise ValueError(f"Unknown derivation method: {method}")


def normalize_value(value: Any) -> Optional[str]:
    """Convert a raw payload value to trimmed text, or None when absent."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item).strip() for item in value if item is not None)
    return str(value)


def validate_field(
    value: Any,
    spec: FieldSpec,
    label: str,
    headers: httpx.Headers
) -> tuple:
    """
    Validates an individual form field, cleaning up its value in the process.

    Returns:
        Tuple of (final value or None, list of error messages)
    """
    errors: List[str] = []
    value = normalize_value(value)

    if spec.required and not value:
        errors.append(f"{label} is required.")

    if spec.honeypot and value:
        errors.append(f"{label} must be empty.")

    if spec.method is not None:
        value = derive_value(spec.method, headers)

    return value, errors


def validate_form_fields(
    payload: RequestPayload,
    form: FormDefinition,
    headers: httpx.Headers
) -> ValidationResult:
    """Validate every declared field of `form`, in declaration order"""
    fields: List[ValidatedField] = []
    errors: Dict[str, List[str]] = {}

    for name, spec in form.fields.items():
        label = form.field_label(name)
        value, field_errors = validate_field(payload.get(name), spec, label, headers)

        if field_errors:
            errors[name] = field_errors

        if value:
            fields.append(ValidatedField(name=name, label=label, value=value))

    if errors:
        logger.info(f"Form validation failed for fields: {', '.join(errors)}")

    return ValidationResult(fields=fields, errors=errors)
