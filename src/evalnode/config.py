"""
Evaluation settings.

Two layers, innermost wins:
- Thread-local defaults installed with set_evaluation_settings() (app startup)
- Scoped overrides pushed with settings_context() (contextvars based)

An EvaluationPass captures the active settings when it is created.
"""

import contextvars
import dataclasses
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationSettings:
    """Tunable constants of the evaluation layer."""
    # Namespace whose run attribute needs a matching mode to have effect
    default_namespace: str = "fox"

    hint_id_prefix: str = "hint"
    field_id_prefix: str = "e"

    # Paths below the bound data item
    error_message_path: str = "fox-error/msg"
    history_path: str = "fox-history"
    history_label_path: str = "fox-history/history/label"
    history_operation_path: str = "fox-history/history/operation"
    history_value_path: str = "fox-history/history/value"

    # Used when field-width/field-height is "auto"
    auto_field_width: int = 20
    min_field_width: int = 1
    max_field_width: int = 80
    auto_field_height: int = 1
    min_field_height: int = 1
    max_field_height: int = 10


_default_settings = threading.local()

# Scoped overrides, None when no settings_context() is active
_current_settings: contextvars.ContextVar[Optional[EvaluationSettings]] = contextvars.ContextVar(
    'current_evaluation_settings', default=None
)


def set_evaluation_settings(settings: EvaluationSettings) -> None:
    """Install the default settings for the current thread."""
    _default_settings.value = settings


def reset_evaluation_settings() -> None:
    """Drop the thread-local defaults, reverting to EvaluationSettings()."""
    if hasattr(_default_settings, 'value'):
        del _default_settings.value


def get_evaluation_settings() -> EvaluationSettings:
    """Get the innermost active settings."""
    scoped = _current_settings.get()
    if scoped is not None:
        return scoped
    return getattr(_default_settings, 'value', None) or EvaluationSettings()


@contextmanager
def settings_context(settings: Optional[EvaluationSettings] = None, **overrides):
    """
    Scope settings for the enclosed block.

    Args:
        settings: Settings to use as the base, defaults to the active settings
        **overrides: Individual fields to replace on the base

    Usage:
        with settings_context(max_field_width=120):
            evaluation_pass = EvaluationPass()
    """
    base = settings if settings is not None else get_evaluation_settings()
    scoped = dataclasses.replace(base, **overrides) if overrides else base
    token = _current_settings.set(scoped)
    logger.debug(f"Entered settings context: {scoped}")
    try:
        yield scoped
    finally:
        _current_settings.reset(token)
