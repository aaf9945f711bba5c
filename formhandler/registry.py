"""Form registry loading"""
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from formhandler.form_sets import PRODUCTION_FORMS, TEST_FORMS
from formhandler.models.forms import FormDefinition

logger = logging.getLogger(__name__)

_forms_adapter = TypeAdapter(Dict[str, FormDefinition])


class FormsConfigError(RuntimeError):
    """Raised when a form configuration can't be loaded"""


class FormRegistry(Mapping[str, FormDefinition]):
    """Read-only mapping of form ID to form definition. Lookups are case-sensitive."""

    def __init__(self, forms: Mapping[str, FormDefinition]):
        self._forms = MappingProxyType(dict(forms))

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "FormRegistry":
        try:
            return cls(_forms_adapter.validate_python(dict(config)))
        except ValidationError as e:
            raise FormsConfigError(f"Invalid form configuration: {e}") from e

    @classmethod
    def from_file(cls, path: Path) -> "FormRegistry":
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise FormsConfigError(f"Can't read forms file {path}: {e}") from e

        try:
            return cls(_forms_adapter.validate_json(raw))
        except ValidationError as e:
            raise FormsConfigError(f"Invalid forms file {path}: {e}") from e

    def __getitem__(self, form_id: str) -> FormDefinition:
        return self._forms[form_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._forms)

    def __len__(self) -> int:
        return len(self._forms)


@lru_cache()
def load_form_registry(test_mode: bool = False, forms_file: Optional[Path] = None) -> FormRegistry:
    """Load the form set once per process"""
    if test_mode:
        registry = FormRegistry.from_config(TEST_FORMS)
    elif forms_file:
        registry = FormRegistry.from_file(forms_file)
    else:
        registry = FormRegistry.from_config(PRODUCTION_FORMS)

    logger.info(f"Loaded {len(registry)} form(s): {', '.join(registry)}")
    return registry
