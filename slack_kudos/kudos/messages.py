"""Block Kit message builders for kudos posts."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

KUDOS_HEADER = "🎉 Novo Elogio! 🎉"
KUDOS_FOOTER = "✨ _Continue fazendo a diferença!_ ✨"


def format_users(user_ids: Iterable[str]) -> str:
    """Format user ids as Slack mentions, e.g. ``<@U1>, <@U2>``."""

    return ", ".join(f"<@{user_id}>" for user_id in user_ids)


def format_as_quote(message: str) -> str:
    """Prefix every line of *message* with ``> `` so Slack renders a quote."""

    if not message:
        return ""
    return "\n".join(f"> {line}" for line in message.split("\n"))


def parse_kudo_type_text(full_text: str) -> tuple[str, str]:
    """Split an option label like ``:zap: Resolvedor(a)`` into emoji and text."""

    index = full_text.find(" ")
    if index > 0:
        return full_text[:index], full_text[index + 1 :]
    return "", full_text


def build_kudos_blocks(
    sender_id: str,
    recipient_ids: List[str],
    kudo_type_emoji: str,
    kudo_type_text: str,
    message: str,
) -> List[Dict[str, Any]]:
    """Build the seven blocks of a kudos post."""

    return [
        {
            "type": "header",
            "text": {"type": "plain_text", "text": KUDOS_HEADER, "emoji": True},
        },
        {
            "type": "section",
            "fields": [
                {"type": "mrkdwn", "text": f"*De:*\n<@{sender_id}>"},
                {"type": "mrkdwn", "text": f"*Para:*\n{format_users(recipient_ids)}"},
            ],
        },
        {"type": "divider"},
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": f"{kudo_type_emoji} *{kudo_type_text}*"},
        },
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": format_as_quote(message)},
        },
        {"type": "divider"},
        {
            "type": "context",
            "elements": [{"type": "mrkdwn", "text": KUDOS_FOOTER}],
        },
    ]


def build_fallback_text(
    sender_id: str,
    recipient_ids: List[str],
    kudo_type_emoji: str,
    kudo_type_text: str,
) -> str:
    """Notification text for clients that do not render blocks."""

    return f"<@{sender_id}> elogiou {format_users(recipient_ids)}: {kudo_type_emoji} {kudo_type_text}"
