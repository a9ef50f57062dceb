"""Tests for block_actions routing: kudo type changes and the reminder button."""

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import app as app_module  # noqa: E402
from slack_kudos.kudos.catalog import KUDO_SUGGESTED_MESSAGES  # noqa: E402
from slack_kudos.kudos.requests import InteractionPayload  # noqa: E402
from tests.fakes import api_error  # noqa: E402


def _payload(actions, *, message=None, trigger_id="T9"):
    values = {}
    if message is not None:
        values["kudo_message"] = {"kudo_message": {"type": "plain_text_input", "value": message}}
    return InteractionPayload.model_validate(
        {
            "type": "block_actions",
            "trigger_id": trigger_id,
            "user": {"id": "U1"},
            "view": {"id": "V1", "hash": "h-1", "state": {"values": values}},
            "actions": actions,
        }
    )


def _select(value):
    return {
        "action_id": "kudo_type",
        "block_id": "kudo_type",
        "selected_option": {"text": {"text": "label"}, "value": value},
    }


def _blocks_by_id(update):
    return {block.get("block_id"): block for block in update["view"]["blocks"]}


def test_kudo_type_selection_updates_modal(ctx, web_client):
    body, status = app_module._handle_interaction(_payload([_select("resolvedor-de-problemas")]), ctx=ctx)

    assert (body, status) == ("", 200)
    [update] = web_client.calls_to("views_update")
    assert update["view_id"] == "V1"
    assert update["hash"] == "h-1"
    blocks = _blocks_by_id(update)
    assert blocks["kudo_description"]["elements"][0]["text"] == (
        "💡 _Resolver problemas complexos, troubleshooting_"
    )
    assert blocks["kudo_message"]["element"]["initial_value"] == KUDO_SUGGESTED_MESSAGES["resolvedor-de-problemas"]


def test_typed_message_is_preserved(ctx, web_client):
    app_module._handle_interaction(_payload([_select("resiliencia")], message="Meu texto"), ctx=ctx)

    [update] = web_client.calls_to("views_update")
    assert _blocks_by_id(update)["kudo_message"]["element"]["initial_value"] == "Meu texto"


def test_custom_selection_shows_name_input_without_suggestion(ctx, web_client):
    app_module._handle_interaction(_payload([_select("custom")]), ctx=ctx)

    [update] = web_client.calls_to("views_update")
    blocks = _blocks_by_id(update)
    assert blocks["kudo_description"]["type"] == "input"
    assert "initial_value" not in blocks["kudo_message"]["element"]


def test_first_matching_action_wins(ctx, web_client):
    actions = [
        {"action_id": "something_else"},
        _select("resiliencia"),
        _select("ideia-brilhante"),
    ]

    app_module._handle_interaction(_payload(actions), ctx=ctx)

    [update] = web_client.calls_to("views_update")
    assert "persistência" in _blocks_by_id(update)["kudo_description"]["elements"][0]["text"]


def test_unrelated_actions_are_acknowledged(ctx, web_client):
    body, status = app_module._handle_interaction(_payload([{"action_id": "other"}]), ctx=ctx)

    assert (body, status) == ("", 200)
    assert web_client.calls == []


def test_empty_actions_are_acknowledged(ctx, web_client):
    assert app_module._handle_interaction(_payload([]), ctx=ctx) == ("", 200)
    assert web_client.calls == []


def test_selection_without_value_is_ignored(ctx, web_client):
    action = {"action_id": "kudo_type", "selected_option": {"value": ""}}

    assert app_module._handle_interaction(_payload([action]), ctx=ctx) == ("", 200)
    assert web_client.calls == []


def test_update_failure_returns_500(ctx, web_client):
    web_client.errors["views_update"] = api_error("hash_conflict")

    body, status = app_module._handle_interaction(_payload([_select("resiliencia")]), ctx=ctx)

    assert status == 500
    assert body == "Error updating modal"


def test_update_transport_error_returns_500(ctx, web_client):
    web_client.errors["views_update"] = TimeoutError("timed out")

    body, status = app_module._handle_interaction(_payload([_select("resiliencia")]), ctx=ctx)

    assert (body, status) == ("Error updating modal", 500)


def test_update_with_broken_template_returns_500(settings, web_client):
    ctx = app_module.HandlerContext(
        settings=settings,
        slack=app_module.SlackClient(client=web_client),
        view_template='{"view": {"blocks": [{"block_id": "kudo_message"}]}}',
    )

    body, status = app_module._handle_interaction(_payload([_select("resiliencia")]), ctx=ctx)

    assert (body, status) == ("Error updating modal", 500)
    assert web_client.calls == []


def test_reminder_button_opens_modal(ctx, web_client):
    payload = _payload([{"action_id": "open_kudos_modal", "block_id": "reminder_actions", "value": "open_modal"}])

    assert app_module._handle_interaction(payload, ctx=ctx) == ("", 200)
    [opened] = web_client.calls_to("views_open")
    assert opened["trigger_id"] == "T9"
    assert opened["view"]["callback_id"] == "give_kudos"


def test_reminder_button_without_trigger(ctx, web_client):
    payload = _payload([{"action_id": "open_kudos_modal"}], trigger_id=None)

    assert app_module._handle_interaction(payload, ctx=ctx) == ("Missing trigger_id", 400)
    assert web_client.calls == []


def test_reminder_button_transport_failure_reports_inline_error(ctx, web_client):
    web_client.errors["views_open"] = TimeoutError("timed out")
    payload = _payload([{"action_id": "open_kudos_modal"}])

    body, status = app_module._handle_interaction(payload, ctx=ctx)

    assert status == 200
    assert body == {
        "response_action": "errors",
        "errors": {"reminder_actions": app_module.REMINDER_OPEN_FAILED},
    }


def test_unknown_interaction_type_is_acknowledged(ctx, web_client):
    payload = InteractionPayload.model_validate({"type": "shortcut", "user": {"id": "U1"}})

    assert app_module._handle_interaction(payload, ctx=ctx) == ("", 200)
    assert web_client.calls == []
