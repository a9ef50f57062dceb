"""Google Cloud Functions entry points for the Slack kudos bot.

Deploy with ``--entry-point slash_command``, ``interactivity`` (HTTP
triggers) or ``reminder`` (Pub/Sub trigger from a weekly Cloud Scheduler job).
"""

from __future__ import annotations

from functools import lru_cache
from uuid import uuid4

import functions_framework
import structlog
from structlog.contextvars import bind_contextvars, unbind_contextvars

from app import HandlerContext, build_context, process_interaction, process_slash_command
from slack_kudos.config import get_settings
from slack_kudos.kudos.reminders import ReminderSummary, send_reminders
from slack_kudos.logging_config import configure_logging


@lru_cache()
def get_context() -> HandlerContext:
    """Return the process-wide handler context; missing settings are fatal."""

    configure_logging()
    return build_context(get_settings())


# Built at import time so missing settings fail the cold start.
get_context()


@functions_framework.http
def slash_command(request):
    return process_slash_command(request, get_context())


@functions_framework.http
def interactivity(request):
    return process_interaction(request, get_context())


@functions_framework.cloud_event
def reminder(cloud_event) -> ReminderSummary:
    """Send the weekly reminder DMs. Partial failures do not fail the event."""

    ctx = get_context()
    bind_contextvars(trace_id=str(uuid4()))
    try:
        structlog.get_logger().info(
            "reminder_triggered",
            event_id=cloud_event.get("id"),
            event_time=cloud_event.get("time"),
        )
        return send_reminders(ctx.slack, ctx.settings.channel_id)
    finally:
        unbind_contextvars("trace_id")
