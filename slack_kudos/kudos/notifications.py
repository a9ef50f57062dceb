"""Utilities for publishing kudos to the Slack channel."""

from __future__ import annotations

from typing import Any, List, Mapping

import structlog
from slack_sdk.errors import SlackApiError

from slack_kudos.slack_client import SLACK_CALL_ERRORS, SlackClient, slack_error_code

from .messages import build_fallback_text, build_kudos_blocks

ALREADY_IN_CHANNEL = "already_in_channel"


def invite_users_to_channel(slack_client: SlackClient, *, channel: str, user_ids: List[str]) -> None:
    """Invite each recipient to the kudos channel; failures are only logged."""

    log = structlog.get_logger().bind(channel=channel)
    for user_id in user_ids:
        try:
            slack_client.invite_users(channel=channel, users=[user_id])
        except SLACK_CALL_ERRORS as exc:
            error_code = slack_error_code(exc)
            if isinstance(exc, SlackApiError) and error_code == ALREADY_IN_CHANNEL:
                log.info("user_already_in_channel", user_id=user_id)
                continue
            log.warning("channel_invite_failed", user_id=user_id, error=error_code)
            continue
        log.info("user_invited_to_channel", user_id=user_id)


def post_kudos(
    slack_client: SlackClient,
    *,
    channel: str,
    sender_id: str,
    recipient_ids: List[str],
    kudo_type_emoji: str,
    kudo_type_text: str,
    message: str,
) -> Mapping[str, Any]:
    """Invite the recipients, then post the kudos message to *channel*.

    Errors from ``chat.postMessage`` propagate to the caller.
    """

    invite_users_to_channel(slack_client, channel=channel, user_ids=recipient_ids)

    blocks = build_kudos_blocks(sender_id, recipient_ids, kudo_type_emoji, kudo_type_text, message)
    fallback_text = build_fallback_text(sender_id, recipient_ids, kudo_type_emoji, kudo_type_text)

    response = slack_client.post_message(channel=channel, text=fallback_text, blocks=blocks)
    structlog.get_logger().info(
        "kudos_posted",
        channel=response.get("channel", channel),
        ts=response.get("ts"),
        recipient_count=len(recipient_ids),
    )
    return response
