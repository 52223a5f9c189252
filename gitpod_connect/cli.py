"""Typer-based CLI for gitpod-connect."""

from __future__ import annotations

import typer
from rich.markup import escape

from . import config, render
from .connect import connect_editor, connect_ssh, resolve_editor
from .environments import EnvironmentService
from .exceptions import GitpodConnectError, ValidationError
from .interactive import Choice, select
from .models import EditorChoice, EnvironmentRecord

app = typer.Typer(
    help="Connect to Gitpod environments over SSH or from a local editor",
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Show the external commands being run."),
) -> None:
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if ctx.invoked_subcommand is None:
        _run_ssh(verbose)


@app.command(help="Open an interactive SSH session to an environment")
def ssh(ctx: typer.Context) -> None:
    _run_ssh(ctx.obj.get("verbose", False))


@app.command(help="Open an environment in VS Code or Cursor over SSH remoting")
def code(
    ctx: typer.Context,
    editor: EditorChoice | None = typer.Option(
        None,
        "--editor",
        "-e",
        case_sensitive=False,
        help="Editor to launch. Defaults to the first of code, cursor found on PATH.",
    ),
    folder: str | None = typer.Option(
        None,
        "--folder",
        "-f",
        help="Remote workspace folder to open.",
    ),
) -> None:
    verbose = ctx.obj.get("verbose", False)
    try:
        # editor lookup must happen before anything is spawned
        launched = resolve_editor(editor or config.get_default_editor())
        folder = folder or config.get_default_folder()
        record = _select_running_environment(verbose)
        connect_editor(record.id, folder, launched, verbose=verbose)
    except GitpodConnectError as err:
        _fail(str(err))
    render.success(f"Launched {launched.value} for {escape(record.display_name)}")


def _run_ssh(verbose: bool) -> None:
    try:
        record = _select_running_environment(verbose)
        exit_code = connect_ssh(record.id, verbose=verbose)
    except GitpodConnectError as err:
        _fail(str(err))
    raise typer.Exit(exit_code)


def _select_running_environment(verbose: bool) -> EnvironmentRecord:
    service = EnvironmentService(verbose=verbose)
    render.info("Fetching Gitpod environments...")
    records = service.list_environments()
    record = _prompt_environment(records)
    service.ensure_running(record)
    return record


def _prompt_environment(records: list[EnvironmentRecord]) -> EnvironmentRecord:
    if not records:
        render.info("No Gitpod environments found.")
        raise typer.Exit(0)
    choices, lookup = _build_environment_choice_data(records)
    selection = select("Choose environment:", choices)
    try:
        return lookup[str(selection)]
    except KeyError as exc:
        raise ValidationError("Selected environment could not be resolved.") from exc


def _build_environment_choice_data(
    records: list[EnvironmentRecord],
) -> tuple[list[Choice], dict[str, EnvironmentRecord]]:
    """Return the choice list used for prompts plus a lookup keyed by id."""

    lookup: dict[str, EnvironmentRecord] = {}
    choices: list[Choice] = []
    for record in records:
        if record.id in lookup:
            raise ValidationError(f"Duplicate environment id detected: {record.id}")
        lookup[record.id] = record
        choices.append(Choice(value=record.id, name=_choice_label(record)))
    return choices, lookup


def _choice_label(record: EnvironmentRecord) -> str:
    glyph = render.status_glyph(record.is_running)
    return f"{glyph} {record.display_name} ({record.repository_url}) - {record.id}"


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
