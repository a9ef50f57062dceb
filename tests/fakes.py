"""Slack WebClient fakes shared by the test modules."""

from slack_sdk.errors import SlackApiError


def api_error(code: str) -> SlackApiError:
    return SlackApiError(f"The request to the Slack API failed. ({code})", {"ok": False, "error": code})


class FakeWebClient:
    """Record WebClient calls; ``errors`` maps a method to an exception or a callable."""

    def __init__(self, *, errors=None, member_pages=None, users=None):
        self.calls = []
        self.errors = errors or {}
        self.member_pages = member_pages or {"": (["U1"], "")}
        self.users = users or {}

    def _record(self, method, kwargs):
        self.calls.append((method, kwargs))
        error = self.errors.get(method)
        if callable(error) and not isinstance(error, BaseException):
            error = error(kwargs)
        if error is not None:
            raise error

    def calls_to(self, method):
        return [kwargs for name, kwargs in self.calls if name == method]

    def views_open(self, **kwargs):
        self._record("views_open", kwargs)
        return {"ok": True, "view": {"id": "V123"}}

    def views_update(self, **kwargs):
        self._record("views_update", kwargs)
        return {"ok": True, "view": {"id": kwargs.get("view_id")}}

    def chat_postMessage(self, **kwargs):
        self._record("chat_postMessage", kwargs)
        return {"ok": True, "channel": kwargs["channel"], "ts": "1700000000.000100"}

    def conversations_invite(self, **kwargs):
        self._record("conversations_invite", kwargs)
        return {"ok": True, "channel": {"id": kwargs["channel"]}}

    def conversations_members(self, **kwargs):
        self._record("conversations_members", kwargs)
        members, next_cursor = self.member_pages[kwargs.get("cursor", "")]
        return {"ok": True, "members": members, "response_metadata": {"next_cursor": next_cursor}}

    def users_info(self, **kwargs):
        self._record("users_info", kwargs)
        user_id = kwargs["user"]
        return {"ok": True, "user": self.users.get(user_id, {"id": user_id})}
