"""Weekly reminder DMs nudging channel members to send kudos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

import structlog

from slack_kudos.slack_client import SLACK_CALL_ERRORS, SlackClient, slack_error_code

REMINDER_ACTIONS_BLOCK_ID = "reminder_actions"
OPEN_KUDOS_MODAL_ACTION_ID = "open_kudos_modal"
REMINDER_FALLBACK_TEXT = "Lembrete semanal: envie um elogio para seus colegas!"


@dataclass(frozen=True)
class ReminderSummary:
    sent: int
    failed: int


def get_channel_members(slack_client: SlackClient, channel: str) -> List[str]:
    """Return the ids of every human, active member of *channel*.

    Pages through ``conversations.members``; bots, deleted users and users
    whose profile cannot be fetched are left out.
    """

    log = structlog.get_logger().bind(channel=channel)
    members: List[str] = []
    cursor = ""
    while True:
        page, cursor = slack_client.list_channel_members(channel=channel, cursor=cursor or None)
        for user_id in page:
            try:
                user = slack_client.get_user_info(user=user_id)
            except SLACK_CALL_ERRORS as exc:
                log.warning("user_info_failed", user_id=user_id, error=slack_error_code(exc))
                continue
            if user.get("is_bot") or user.get("deleted"):
                continue
            members.append(user_id)
        if not cursor:
            break
    return members


def build_reminder_blocks() -> List[Dict[str, Any]]:
    return [
        {
            "type": "header",
            "text": {"type": "plain_text", "text": "👋 Lembrete Semanal de Kudos"},
        },
        {
            "type": "section",
            "text": {
                "type": "mrkdwn",
                "text": (
                    "Esta semana você reconheceu algum colega pelo trabalho excepcional?\n\n"
                    "Use `/elogie` para enviar um elogio e valorizar sua equipe!"
                ),
            },
        },
        {
            "type": "actions",
            "block_id": REMINDER_ACTIONS_BLOCK_ID,
            "elements": [
                {
                    "type": "button",
                    "action_id": OPEN_KUDOS_MODAL_ACTION_ID,
                    "value": "open_modal",
                    "style": "primary",
                    "text": {"type": "plain_text", "text": "📝 Enviar Elogio Agora"},
                }
            ],
        },
        {"type": "divider"},
        {
            "type": "context",
            "block_id": "reminder_context",
            "elements": [
                {
                    "type": "mrkdwn",
                    "text": "💡 *Dica:* Elogios específicos e detalhados têm mais impacto!",
                }
            ],
        },
    ]


def send_reminder_dm(slack_client: SlackClient, user_id: str) -> None:
    """Send the reminder to *user_id* as a direct message from the bot."""

    slack_client.post_message(
        channel=user_id,
        text=REMINDER_FALLBACK_TEXT,
        blocks=build_reminder_blocks(),
    )


def send_reminders(slack_client: SlackClient, channel: str) -> ReminderSummary:
    """DM every member of *channel*; individual failures are logged and counted."""

    log = structlog.get_logger().bind(channel=channel)
    members = get_channel_members(slack_client, channel)
    log.info("reminder_members_found", member_count=len(members))

    sent = 0
    failed = 0
    for user_id in members:
        try:
            send_reminder_dm(slack_client, user_id)
        except SLACK_CALL_ERRORS as exc:
            failed += 1
            log.warning("reminder_dm_failed", user_id=user_id, error=slack_error_code(exc))
            continue
        sent += 1
        log.info("reminder_dm_sent", user_id=user_id)

    log.info("reminders_complete", sent=sent, failed=failed)
    return ReminderSummary(sent=sent, failed=failed)
