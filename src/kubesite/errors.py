"""Exceptions raised by kubesite."""


class KubesiteError(Exception):
    """Base class for all kubesite errors."""


class ConfigError(KubesiteError):
    """Invalid settings or an unreadable mkdocs configuration."""


class FetchError(KubesiteError):
    """Downloading an upstream file failed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class SyncError(KubesiteError):
    """A sync run was aborted by a failing source."""

    def __init__(self, dest: str, cause: Exception):
        self.dest = dest
        self.cause = cause
        super().__init__(f"Sync aborted at '{dest}': {cause}")


class ToolNotFoundError(KubesiteError):
    """An external executable is not on PATH."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"{tool} command not found")
