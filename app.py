"""Application entry point for the Slack kudos bot."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping
from uuid import uuid4

from flask import Flask, jsonify, request
from slack_sdk.errors import SlackApiError
import structlog
from structlog.contextvars import bind_contextvars, unbind_contextvars
from werkzeug.exceptions import HTTPException

from slack_kudos.config import AppSettings, get_settings
from slack_kudos.logging_config import configure_logging
from slack_kudos.security import verify_request
from slack_kudos.slack_client import SLACK_CALL_ERRORS, SlackClient, slack_error_code
from slack_kudos.kudos.loader import load_view_template
from slack_kudos.kudos.modal import (
    KUDO_MESSAGE_BLOCK_ID,
    KUDO_TYPE_BLOCK_ID,
    TemplateError,
    build_initial_modal,
    build_modal_update,
    resolve_message_prefill,
)
from slack_kudos.kudos.notifications import post_kudos
from slack_kudos.kudos.reminders import OPEN_KUDOS_MODAL_ACTION_ID, REMINDER_ACTIONS_BLOCK_ID
from slack_kudos.kudos.requests import (
    BLOCK_ACTIONS,
    VIEW_SUBMISSION,
    InteractionPayload,
    parse_interaction_payload,
    parse_kudos_submission,
    resolve_post_content,
    validate_custom_submission,
)

REMINDER_OPEN_FAILED = "Não foi possível abrir o modal. Tente usar o comando /elogie"

_MODAL_ERRORS = (TemplateError, *SLACK_CALL_ERRORS)

HandlerResult = tuple[Any, int]


@dataclass(frozen=True)
class HandlerContext:
    """Everything a handler needs, built once per process."""

    settings: AppSettings
    slack: SlackClient
    view_template: str


def build_context(settings: AppSettings, *, slack_client: SlackClient | None = None) -> HandlerContext:
    if slack_client is None:
        slack_client = SlackClient(token=settings.bot_token, timeout=settings.api_timeout)
    return HandlerContext(settings=settings, slack=slack_client, view_template=load_view_template())


def _open_modal(ctx: HandlerContext, trigger_id: str) -> None:
    log = structlog.get_logger()
    payload = build_initial_modal(trigger_id, ctx.view_template)
    try:
        ctx.slack.open_view(payload)
    except SlackApiError as exc:
        # Trigger ids are single-use; a rejected open is only reported.
        log.warning("modal_open_rejected", error=slack_error_code(exc))
        return
    log.info("modal_opened")


def _handle_slash_command(form: Mapping[str, str], *, ctx: HandlerContext) -> HandlerResult:
    log = structlog.get_logger().bind(command=form.get("command"), user_id=form.get("user_id"))
    log.info("slash_command_received")

    trigger_id = form.get("trigger_id") or ""
    if not trigger_id:
        log.warning("slash_command_missing_trigger")
        return "Missing trigger_id", 400

    try:
        _open_modal(ctx, trigger_id)
    except _MODAL_ERRORS as exc:
        log.error("modal_open_failed", error=slack_error_code(exc))
        return "Internal Server Error", 500
    return "", 200


def _update_kudo_type(payload: InteractionPayload, kudo_type: str, *, ctx: HandlerContext) -> HandlerResult:
    view_id = payload.view.id if payload.view else ""
    view_hash = payload.view.hash if payload.view else ""
    log = structlog.get_logger().bind(user_id=payload.user.id, view_id=view_id, kudo_type=kudo_type)

    current_message = payload.state_field(KUDO_MESSAGE_BLOCK_ID).value or ""
    message_value = resolve_message_prefill(kudo_type, current_message)

    try:
        update = build_modal_update(view_id, view_hash, kudo_type, message_value, ctx.view_template)
        ctx.slack.update_view(update)
    except _MODAL_ERRORS as exc:
        log.error("modal_update_failed", error=slack_error_code(exc))
        return "Error updating modal", 500

    log.info("modal_updated")
    return "", 200


def _handle_reminder_button(payload: InteractionPayload, *, ctx: HandlerContext) -> HandlerResult:
    log = structlog.get_logger().bind(user_id=payload.user.id)
    trigger_id = payload.trigger_id or ""
    if not trigger_id:
        log.warning("reminder_button_missing_trigger")
        return "Missing trigger_id", 400

    try:
        _open_modal(ctx, trigger_id)
    except _MODAL_ERRORS as exc:
        log.error("reminder_modal_open_failed", error=slack_error_code(exc))
        return {
            "response_action": "errors",
            "errors": {REMINDER_ACTIONS_BLOCK_ID: REMINDER_OPEN_FAILED},
        }, 200
    return "", 200


def _handle_block_actions(payload: InteractionPayload, *, ctx: HandlerContext) -> HandlerResult:
    for action in payload.actions:
        if action.action_id == KUDO_TYPE_BLOCK_ID and action.selected_value:
            return _update_kudo_type(payload, action.selected_value, ctx=ctx)

    for action in payload.actions:
        if action.action_id == OPEN_KUDOS_MODAL_ACTION_ID:
            return _handle_reminder_button(payload, ctx=ctx)

    structlog.get_logger().info(
        "block_actions_ignored",
        action_ids=[action.action_id for action in payload.actions],
    )
    return "", 200


def _handle_view_submission(payload: InteractionPayload, *, ctx: HandlerContext) -> HandlerResult:
    log = structlog.get_logger().bind(user_id=payload.user.id)
    try:
        submission = parse_kudos_submission(payload)
    except ValueError as exc:
        log.warning("submission_invalid_state", error=str(exc))
        return "Bad Request", 400

    log = log.bind(kudo_type=submission.kudo_type, recipient_count=len(submission.recipient_ids))

    if submission.is_custom:
        errors = validate_custom_submission(submission)
        if errors:
            log.info("submission_validation_failed", fields=sorted(errors))
            return {"response_action": "errors", "errors": errors}, 200

    emoji, text, message = resolve_post_content(submission)
    try:
        post_kudos(
            ctx.slack,
            channel=ctx.settings.channel_id,
            sender_id=submission.sender_id,
            recipient_ids=submission.recipient_ids,
            kudo_type_emoji=emoji,
            kudo_type_text=text,
            message=message,
        )
    except SLACK_CALL_ERRORS as exc:
        # The modal is already closed; there is nowhere to show this error.
        log.error("kudos_post_failed", channel=ctx.settings.channel_id, error=slack_error_code(exc))
    return "", 200


def _handle_interaction(payload: InteractionPayload, *, ctx: HandlerContext) -> HandlerResult:
    if payload.type == BLOCK_ACTIONS:
        return _handle_block_actions(payload, ctx=ctx)
    if payload.type == VIEW_SUBMISSION:
        return _handle_view_submission(payload, ctx=ctx)

    structlog.get_logger().info("interaction_ignored", interaction_type=payload.type)
    return "", 200


def _invalid_signature(endpoint: str) -> HandlerResult:
    structlog.get_logger().warning("invalid_signature", endpoint=endpoint)
    return {"error": "invalid_signature"}, 401


def process_slash_command(req, ctx: HandlerContext) -> HandlerResult:
    """Verify and handle a slash command request (Flask or Functions Framework)."""

    trace_id = str(uuid4())
    bind_contextvars(trace_id=trace_id)
    try:
        if not verify_request(req, ctx.settings.signing_secret):
            return _invalid_signature("slash_command")
        return _handle_slash_command(req.form, ctx=ctx)
    finally:
        unbind_contextvars("trace_id")


def process_interaction(req, ctx: HandlerContext) -> HandlerResult:
    """Verify, decode and route an interactivity request."""

    trace_id = str(uuid4())
    bind_contextvars(trace_id=trace_id)
    log = structlog.get_logger()
    try:
        if not verify_request(req, ctx.settings.signing_secret):
            return _invalid_signature("interactivity")

        raw_payload = req.form.get("payload") or ""
        if not raw_payload:
            log.warning("interaction_missing_payload")
            return "Bad Request", 400

        try:
            payload = parse_interaction_payload(raw_payload)
        except ValueError as exc:
            log.warning("interaction_invalid_payload", error=str(exc))
            return "Invalid Slack Interaction Callback", 400

        return _handle_interaction(payload, ctx=ctx)
    finally:
        unbind_contextvars("trace_id")


def _register_error_handlers(flask_app: Flask) -> None:
    """Register a JSON error handler that attaches a trace identifier."""

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):  # type: ignore[override]
        if isinstance(error, HTTPException):
            return error
        trace_id = str(uuid4())
        flask_app.logger.exception(
            "Unhandled application error", extra={"trace_id": trace_id}, exc_info=error
        )
        response = jsonify({"error": "internal_server_error", "trace_id": trace_id})
        response.status_code = 500
        return response


def _load_version() -> str:
    version_file = Path(__file__).resolve().parent / "VERSION"
    if version_file.exists():
        return version_file.read_text(encoding="utf-8").strip()
    return "unknown"


def create_app(settings: AppSettings | None = None, *, slack_client: SlackClient | None = None) -> Flask:
    """Create and configure the Flask application."""

    configure_logging()
    settings_from_env = settings is None
    ctx = build_context(settings or get_settings(), slack_client=slack_client)

    flask_app = Flask(__name__)
    flask_app.config["APP_VERSION"] = _load_version()
    flask_app.logger.setLevel("INFO")
    _register_error_handlers(flask_app)

    @flask_app.route("/slack/commands", methods=["POST"])
    def slack_commands():
        return process_slash_command(request, ctx)

    @flask_app.route("/slack/interactivity", methods=["POST"])
    def slack_interactivity():
        return process_interaction(request, ctx)

    @flask_app.route("/healthz", methods=["GET"])
    def healthz():
        health: dict[str, object] = {"ok": True}
        health["version"] = flask_app.config.get("APP_VERSION", "unknown")
        try:
            if settings_from_env:
                get_settings()
            health["config"] = "valid"
        except RuntimeError as exc:
            health["config"] = "invalid"
            health["config_error"] = str(exc)
            health["ok"] = False
        status = 200 if health["ok"] else 503
        return jsonify(health), status

    return flask_app


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    application = create_app()
    application.run(host="0.0.0.0", port=3000, debug=True)
