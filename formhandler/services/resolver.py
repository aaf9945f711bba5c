"""Form resolution"""
from enum import Enum
from typing import NamedTuple, Optional

from formhandler.models.events import RequestPayload
from formhandler.models.forms import FormDefinition
from formhandler.registry import FormRegistry


class ResolutionStatus(str, Enum):
    RESOLVED = "resolved"
    INVALID_ID = "invalid_id"
    NO_ID = "no_id"


class FormResolution(NamedTuple):
    status: ResolutionStatus
    form_id: Optional[str] = None
    form: Optional[FormDefinition] = None

    @property
    def has_form_id(self) -> bool:
        return self.status is not ResolutionStatus.NO_ID


def get_form_id(payload: RequestPayload, path: Optional[str]) -> Optional[str]:
    """
    Get the form ID from a `form` field, falling back to a `/form/{id}`
    request path.
    """
    form_id = payload.get("form")
    if form_id:
        return str(form_id)

    if path:
        pieces = [piece for piece in path.split("/") if piece]
        if len(pieces) >= 2 and pieces[0] == "form":
            return pieces[1]

    return None


def resolve_form(
    payload: Optional[RequestPayload],
    path: Optional[str],
    registry: FormRegistry
) -> FormResolution:
    """Work out which form a request is for. Requests without a payload have no form ID."""
    if payload is None:
        return FormResolution(ResolutionStatus.NO_ID)

    form_id = get_form_id(payload, path)
    if form_id is None:
        return FormResolution(ResolutionStatus.NO_ID)

    form = registry.get(form_id)
    if form is None:
        return FormResolution(ResolutionStatus.INVALID_ID, form_id)

    return FormResolution(ResolutionStatus.RESOLVED, form_id, form)
