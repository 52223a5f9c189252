"""Interactive prompt helpers built on InquirerPy."""

from __future__ import annotations

import sys
from typing import Any, Sequence

from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from .exceptions import UserAbort, ValidationError

PAGE_SIZE = 10


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise ValidationError("Interactive mode requires a TTY to choose an environment.")


def select(message: str, choices: Sequence[Choice | str]) -> Any:
    _ensure_tty()
    try:
        return inquirer.select(
            message=message,
            choices=choices,
            max_height=PAGE_SIZE,
        ).execute()
    except KeyboardInterrupt as exc:
        raise UserAbort("Selection cancelled.") from exc
