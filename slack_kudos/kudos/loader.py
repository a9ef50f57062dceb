"""Loader for the static kudos modal template."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
VIEW_TEMPLATE_FILE = TEMPLATE_DIR / "give_kudos_view.json"


@lru_cache()
def load_view_template(file_path: Path = VIEW_TEMPLATE_FILE) -> str:
    """Return the raw JSON text of the modal template.

    Only the text is cached; callers parse it on every use so the pristine
    document is never mutated.
    """

    return file_path.read_text(encoding="utf-8")
