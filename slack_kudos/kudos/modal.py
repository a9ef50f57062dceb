"""Builders for the views.open and views.update bodies of the kudos modal.

Every call starts from the pristine template text and replays the current
selection onto it, so repeated updates never accumulate description blocks.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from .catalog import CUSTOM_KUDO_TYPE, describe_kudo_type, suggested_message

KUDO_TYPE_BLOCK_ID = "kudo_type"
KUDO_DESCRIPTION_BLOCK_ID = "kudo_description"
KUDO_MESSAGE_BLOCK_ID = "kudo_message"
KUDO_USERS_BLOCK_ID = "kudo_users"

CUSTOM_NAME_LABEL = "Nome do tipo de elogio"
CUSTOM_NAME_PLACEHOLDER = "Ex: Super Colaborador, Líder Inspirador..."


class TemplateError(Exception):
    """Raised when the modal template does not have the expected structure."""


def _parse_template(template: str) -> Dict[str, Any]:
    try:
        document = json.loads(template)
    except json.JSONDecodeError as exc:
        raise TemplateError(f"error parsing view template: {exc}") from exc
    if not isinstance(document, dict):
        raise TemplateError("view template must be a JSON object")
    return document


def _template_blocks(document: Dict[str, Any]) -> tuple[Dict[str, Any], List[Any]]:
    view = document.get("view")
    if not isinstance(view, dict):
        raise TemplateError("invalid view structure in template")
    blocks = view.get("blocks")
    if not isinstance(blocks, list):
        raise TemplateError("invalid blocks structure in template")
    return view, blocks


def _custom_description_block(existing_block: Any) -> Dict[str, Any]:
    element: Dict[str, Any] = {
        "type": "plain_text_input",
        "action_id": KUDO_DESCRIPTION_BLOCK_ID,
        "placeholder": {
            "type": "plain_text",
            "text": CUSTOM_NAME_PLACEHOLDER,
            "emoji": True,
        },
    }
    # A custom name typed earlier lives in the previous input block.
    if isinstance(existing_block, dict):
        existing_element = existing_block.get("element")
        if isinstance(existing_element, dict):
            previous_name = existing_element.get("initial_value")
            if isinstance(previous_name, str) and previous_name:
                element["initial_value"] = previous_name

    return {
        "type": "input",
        "block_id": KUDO_DESCRIPTION_BLOCK_ID,
        "label": {
            "type": "plain_text",
            "text": CUSTOM_NAME_LABEL,
            "emoji": True,
        },
        "element": element,
    }


def _context_description_block(kudo_type: str) -> Dict[str, Any]:
    return {
        "type": "context",
        "block_id": KUDO_DESCRIPTION_BLOCK_ID,
        "elements": [
            {
                "type": "mrkdwn",
                "text": f"💡 _{describe_kudo_type(kudo_type)}_",
            }
        ],
    }


def build_initial_modal(trigger_id: str, template: str) -> Dict[str, Any]:
    """Return the ``views.open`` body: the template plus the trigger id."""

    document = _parse_template(template)
    document["trigger_id"] = trigger_id
    return document


def build_modal_update(
    view_id: str,
    view_hash: str,
    selected_kudo_type: str,
    message_value: str,
    template: str,
) -> Dict[str, Any]:
    """Return the ``views.update`` body for a newly selected kudo type.

    The description slot right after the type selector becomes a read-only
    context block for predefined types, or a text input asking for the name
    of a custom type. A non-empty *message_value* pre-fills the message field.
    """

    document = _parse_template(template)
    view, blocks = _template_blocks(document)

    kudo_type_index = -1
    description_index = -1
    for index, block in enumerate(blocks):
        if not isinstance(block, dict):
            continue
        block_id = block.get("block_id")
        if block_id == KUDO_TYPE_BLOCK_ID:
            kudo_type_index = index
        elif block_id == KUDO_DESCRIPTION_BLOCK_ID:
            description_index = index
        elif block_id == KUDO_MESSAGE_BLOCK_ID:
            element = block.get("element")
            if isinstance(element, dict) and message_value:
                element["initial_value"] = message_value

    if kudo_type_index == -1:
        raise TemplateError("kudo_type block missing from view template")

    if selected_kudo_type == CUSTOM_KUDO_TYPE:
        existing = blocks[description_index] if description_index != -1 else None
        description_block = _custom_description_block(existing)
    else:
        description_block = _context_description_block(selected_kudo_type)

    if description_index == -1:
        blocks.insert(kudo_type_index + 1, description_block)
    else:
        blocks[description_index] = description_block

    return {
        "view_id": view_id,
        "hash": view_hash,
        "view": view,
    }


def resolve_message_prefill(selected_kudo_type: str, current_message: str) -> str:
    """Return the message field value to replay after a type change.

    Typed text always wins. An empty field gets the suggestion of a
    predefined type; custom types never get a suggestion, and text suggested
    for a previous type is passed through untouched.
    """

    if selected_kudo_type == CUSTOM_KUDO_TYPE or current_message:
        return current_message
    return suggested_message(selected_kudo_type)
