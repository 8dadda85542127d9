"""Site settings resolved from the environment and mkdocs.yml."""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from kubesite.errors import ConfigError
from kubesite.site.mkdocs import load_mkdocs_config

DEFAULT_SYNC_TIMEOUT = 30.0
DEFAULT_PREVIEW_URL = "http://127.0.0.1:8000/"


class SiteConfig:
    """Paths and tool settings for one website checkout."""

    def __init__(
        self,
        root: Optional[Path] = None,
        docs_dir: Optional[Path] = None,
        mkdocs_config: Optional[Path] = None,
        sync_timeout: float = DEFAULT_SYNC_TIMEOUT,
        lychee: str = "lychee",
        preview_url: str = DEFAULT_PREVIEW_URL,
    ):
        self.root = Path(root or Path.cwd())
        self.mkdocs_config = Path(mkdocs_config or self.root / "mkdocs.yml")
        self.docs_dir = Path(docs_dir) if docs_dir else self._docs_dir_from_mkdocs()
        self.sync_timeout = sync_timeout
        self.lychee = lychee
        self.preview_url = preview_url

    def _docs_dir_from_mkdocs(self) -> Path:
        """mkdocs resolves docs_dir relative to the config file; default is docs/."""
        default = self.root / "docs"
        if not self.mkdocs_config.exists():
            return default
        docs_dir = load_mkdocs_config(self.mkdocs_config).get("docs_dir")
        if not docs_dir:
            return default
        return self.mkdocs_config.parent / docs_dir

    @classmethod
    def from_env(cls) -> "SiteConfig":
        """Build settings from KUBESITE_* environment variables."""
        root_env = os.environ.get("KUBESITE_ROOT")
        docs_env = os.environ.get("KUBESITE_DOCS_DIR")
        mkdocs_env = os.environ.get("KUBESITE_MKDOCS_CONFIG")
        timeout_env = os.environ.get("KUBESITE_SYNC_TIMEOUT", str(DEFAULT_SYNC_TIMEOUT))

        try:
            timeout = float(timeout_env)
        except ValueError:
            raise ConfigError(f"KUBESITE_SYNC_TIMEOUT must be a number, got {timeout_env!r}")
        if timeout <= 0:
            raise ConfigError(f"KUBESITE_SYNC_TIMEOUT must be positive, got {timeout}")

        config = cls(
            root=Path(root_env) if root_env else None,
            docs_dir=Path(docs_env) if docs_env else None,
            mkdocs_config=Path(mkdocs_env) if mkdocs_env else None,
            sync_timeout=timeout,
            lychee=os.environ.get("KUBESITE_LYCHEE", "lychee"),
        )
        logger.debug(f"SiteConfig resolved - root: {config.root}, docs_dir: {config.docs_dir}")
        return config
