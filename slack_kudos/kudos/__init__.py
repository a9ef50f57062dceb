"""Kudos catalog, modal template engine, message builders and reminders."""

from .catalog import (
    CUSTOM_KUDO_TYPE,
    KUDO_DESCRIPTIONS,
    KUDO_SUGGESTED_MESSAGES,
    describe_kudo_type,
    suggested_message,
)
from .loader import load_view_template
from .messages import build_fallback_text, build_kudos_blocks
from .modal import TemplateError, build_initial_modal, build_modal_update, resolve_message_prefill
from .notifications import post_kudos
from .reminders import OPEN_KUDOS_MODAL_ACTION_ID, send_reminders

__all__ = [
    "CUSTOM_KUDO_TYPE",
    "KUDO_DESCRIPTIONS",
    "KUDO_SUGGESTED_MESSAGES",
    "describe_kudo_type",
    "suggested_message",
    "load_view_template",
    "build_fallback_text",
    "build_kudos_blocks",
    "TemplateError",
    "build_initial_modal",
    "build_modal_update",
    "resolve_message_prefill",
    "post_kudos",
    "OPEN_KUDOS_MODAL_ACTION_ID",
    "send_reminders",
]
