"""FastAPI dependencies"""
from fastapi import Depends

from formhandler.config import Settings, get_settings
from formhandler.registry import FormRegistry, load_form_registry
from formhandler.services.notifier import NotificationDispatcher


def get_form_registry(settings: Settings = Depends(get_settings)) -> FormRegistry:
    """Production or test form set, depending on the `TEST` flag"""
    return load_form_registry(settings.test, settings.forms_file)


def get_dispatcher(settings: Settings = Depends(get_settings)) -> NotificationDispatcher:
    return NotificationDispatcher(settings)
