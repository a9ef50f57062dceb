"""Thin wrapper utilities around the Slack WebClient."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

MEMBERS_PAGE_LIMIT = 200  # maximum allowed by conversations.members

# ``SlackApiError`` covers ``ok: false`` and non-2xx answers; the rest are
# transport failures raised before Slack could answer.
SLACK_CALL_ERRORS = (SlackClientError, OSError)


def slack_error_code(exc: Exception) -> str:
    """Return the Slack ``error`` field for API errors, or the exception text."""

    if isinstance(exc, SlackApiError) and getattr(exc, "response", None) is not None:
        return str(exc.response.get("error") or exc)
    return str(exc)


class SlackClient:
    """Encapsulate Slack WebClient interactions for easier testing."""

    def __init__(
        self,
        *,
        token: str | None = None,
        client: WebClient | None = None,
        timeout: int = 10,
    ) -> None:
        if client is None and token is None:
            raise ValueError("Either an instantiated client or a bot token must be provided.")

        self._client = client or WebClient(token=token, timeout=timeout)

    @property
    def client(self) -> WebClient:
        """Expose the underlying WebClient for advanced use cases."""

        return self._client

    def open_view(self, payload: Mapping[str, Any]) -> Mapping[str, Any]:
        """Open a modal; *payload* is the full ``views.open`` body."""

        return self._client.views_open(**payload)

    def update_view(self, payload: Mapping[str, Any]) -> Mapping[str, Any]:
        """Update an open modal; *payload* is the full ``views.update`` body."""

        return self._client.views_update(**payload)

    def post_message(
        self,
        *,
        channel: str,
        text: str,
        blocks: Sequence[Mapping[str, Any]],
    ) -> Mapping[str, Any]:
        """Post a message with Block Kit content to a channel or user."""

        return self._client.chat_postMessage(channel=channel, text=text, blocks=list(blocks))

    def invite_users(self, *, channel: str, users: Sequence[str]) -> Mapping[str, Any]:
        """Invite users to a conversation."""

        return self._client.conversations_invite(channel=channel, users=list(users))

    def list_channel_members(self, *, channel: str, cursor: str | None = None) -> tuple[list[str], str]:
        """Return one page of channel member ids and the cursor of the next page."""

        kwargs: dict[str, Any] = {"channel": channel, "limit": MEMBERS_PAGE_LIMIT}
        if cursor:
            kwargs["cursor"] = cursor
        response = self._client.conversations_members(**kwargs)
        members = list(response.get("members") or [])
        next_cursor = (response.get("response_metadata") or {}).get("next_cursor") or ""
        return members, next_cursor

    def get_user_info(self, *, user: str) -> Mapping[str, Any]:
        """Return the ``user`` object of ``users.info``."""

        response = self._client.users_info(user=user)
        return response.get("user") or {}
