"""Models and helpers for Slack interaction payloads of the kudos modal."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Dict, List

from pydantic import BaseModel, Field, ValidationError

from .catalog import CUSTOM_KUDO_EMOJI, CUSTOM_KUDO_TYPE, suggested_message
from .messages import parse_kudo_type_text
from .modal import KUDO_DESCRIPTION_BLOCK_ID, KUDO_MESSAGE_BLOCK_ID, KUDO_TYPE_BLOCK_ID, KUDO_USERS_BLOCK_ID

BLOCK_ACTIONS = "block_actions"
VIEW_SUBMISSION = "view_submission"

MAX_CUSTOM_NAME_LENGTH = 150

CUSTOM_NAME_REQUIRED = "Por favor, preencha o nome do tipo de elogio"
CUSTOM_NAME_TOO_LONG = "Nome do tipo de elogio muito longo (máximo 150 caracteres)"
CUSTOM_MESSAGE_REQUIRED = "A mensagem é obrigatória para elogios personalizados"


class OptionText(BaseModel):
    text: str = ""


class SelectedOption(BaseModel):
    """Option picked in a select element."""

    text: OptionText = Field(default_factory=OptionText)
    value: str = ""


class FieldState(BaseModel):
    """Current value of one element inside ``view.state.values``."""

    value: str | None = None
    selected_option: SelectedOption | None = None
    selected_users: List[str] | None = None


class ViewState(BaseModel):
    values: Dict[str, Dict[str, FieldState]] = Field(default_factory=dict)


class InteractionView(BaseModel):
    id: str = ""
    hash: str = ""
    state: ViewState | None = None


class BlockAction(BaseModel):
    """One entry of the ``actions`` list of a ``block_actions`` payload."""

    action_id: str = ""
    block_id: str | None = None
    value: str | None = None
    selected_option: SelectedOption | None = None

    @property
    def selected_value(self) -> str:
        if self.selected_option is None:
            return ""
        return self.selected_option.value


class InteractionUser(BaseModel):
    id: str = ""


class InteractionPayload(BaseModel):
    """Subset of the Slack interaction payload used by the kudos flow."""

    type: str = ""
    trigger_id: str | None = None
    user: InteractionUser = Field(default_factory=InteractionUser)
    view: InteractionView | None = None
    actions: List[BlockAction] = Field(default_factory=list)

    def state_field(self, block_id: str, action_id: str | None = None) -> FieldState:
        """Return the state of ``block_id``/``action_id`` or an empty state."""

        if self.view is None or self.view.state is None:
            return FieldState()
        block = self.view.state.values.get(block_id) or {}
        return block.get(action_id or block_id) or FieldState()


def parse_interaction_payload(raw_payload: str) -> InteractionPayload:
    """Parse the ``payload`` form field of an interactivity request."""

    try:
        data = json.loads(raw_payload)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid Slack Interaction Callback") from exc

    if not isinstance(data, dict):
        raise ValueError("Invalid Slack Interaction Callback")

    try:
        return InteractionPayload.model_validate(data)
    except ValidationError as exc:
        raise ValueError("Invalid Slack Interaction Callback") from exc


@dataclass(frozen=True)
class KudosSubmission:
    """Values of a submitted kudos modal."""

    sender_id: str
    recipient_ids: List[str]
    message: str
    kudo_type: str
    kudo_type_label: str
    custom_name: str = ""

    @property
    def is_custom(self) -> bool:
        return self.kudo_type == CUSTOM_KUDO_TYPE


def parse_kudos_submission(payload: InteractionPayload) -> KudosSubmission:
    """Extract the kudos fields from a ``view_submission`` payload."""

    if payload.view is None or payload.view.state is None:
        raise ValueError("Invalid view state in submission")

    users = payload.state_field(KUDO_USERS_BLOCK_ID)
    message = payload.state_field(KUDO_MESSAGE_BLOCK_ID)
    kudo_type = payload.state_field(KUDO_TYPE_BLOCK_ID)
    custom_name = payload.state_field(KUDO_DESCRIPTION_BLOCK_ID)
    option = kudo_type.selected_option or SelectedOption()

    return KudosSubmission(
        sender_id=payload.user.id,
        recipient_ids=list(users.selected_users or []),
        message=message.value or "",
        kudo_type=option.value,
        kudo_type_label=option.text.text,
        custom_name=(custom_name.value or "").strip(),
    )


def validate_custom_submission(submission: KudosSubmission) -> Dict[str, str]:
    """Return inline form errors for a custom kudo type, keyed by block id."""

    errors: Dict[str, str] = {}
    if not submission.custom_name:
        errors[KUDO_DESCRIPTION_BLOCK_ID] = CUSTOM_NAME_REQUIRED
    elif len(submission.custom_name) > MAX_CUSTOM_NAME_LENGTH:
        errors[KUDO_DESCRIPTION_BLOCK_ID] = CUSTOM_NAME_TOO_LONG

    if not submission.message:
        errors[KUDO_MESSAGE_BLOCK_ID] = CUSTOM_MESSAGE_REQUIRED
    return errors


def resolve_post_content(submission: KudosSubmission) -> tuple[str, str, str]:
    """Return the emoji, type text and message to post for a submission."""

    if submission.is_custom:
        return CUSTOM_KUDO_EMOJI, submission.custom_name, submission.message

    message = submission.message or suggested_message(submission.kudo_type)
    emoji, text = parse_kudo_type_text(submission.kudo_type_label)
    return emoji, text, message
