"""Custom exception hierarchy for gitpod-connect."""


class GitpodConnectError(Exception):
    """Base error for all custom exceptions."""


class ToolNotFound(GitpodConnectError):
    """Raised when an external executable cannot be located."""

    def __init__(self, tool: str, hint: str | None = None):
        message = f"{tool} command not found."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)
        self.tool = tool
        self.hint = hint or ""


class ToolError(GitpodConnectError):
    """Raised when an external command runs but reports a failure."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None):
        message = "Command failed"
        if command:
            message = f"Command failed: {' '.join(command)}"
        detail = (stderr or "").strip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""


class EditorNotFound(GitpodConnectError):
    """Raised when no supported editor command is available."""


class ValidationError(GitpodConnectError):
    """Raised when user input or selection state is invalid."""


class UserAbort(GitpodConnectError):
    """Raised when the user cancels an interactive flow."""
