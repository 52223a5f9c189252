"""Configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ValidationError
from .models import EditorChoice


@dataclass
class Config:
    """Application defaults."""

    default_folder: str = "/workspace"


def get_default_folder() -> str:
    """Get the remote workspace folder from env or config."""
    return os.getenv("GITPOD_CONNECT_FOLDER") or Config.default_folder


def get_default_editor() -> EditorChoice | None:
    """Get the preferred editor from env, if one is configured."""
    raw = os.getenv("GITPOD_CONNECT_EDITOR", "").strip()
    if not raw:
        return None
    try:
        return EditorChoice(raw.lower())
    except ValueError:
        supported = ", ".join(choice.value for choice in EditorChoice)
        raise ValidationError(
            f"Unsupported editor in GITPOD_CONNECT_EDITOR: {raw}. Expected one of: {supported}"
        ) from None
