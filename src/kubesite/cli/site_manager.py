"""Wrappers around the external tools the website is built and checked with."""

import os
import shutil
import subprocess
import threading
import webbrowser
from typing import List, Optional

import psutil
from loguru import logger
from rich.console import Console

from kubesite.config import SiteConfig
from kubesite.errors import ToolNotFoundError

VENV_INSTRUCTIONS = (
    "Activate virtualenv first",
    "Please run:",
    "python3 -m venv venv && source venv/bin/activate && pip install -r requirements.txt",
    "or, if you have already installed it:",
    "source venv/bin/activate",
)


class SiteManager:
    """Runs mkdocs and lychee against one website checkout."""

    def __init__(self, config: SiteConfig, console: Optional[Console] = None):
        self.config = config
        self.console = console or Console()

    def is_virtualenv_active(self) -> bool:
        return bool(os.environ.get("VIRTUAL_ENV"))

    def require_tool(self, tool: str) -> str:
        path = shutil.which(tool)
        if not path:
            raise ToolNotFoundError(tool)
        return path

    def find_running_preview(self) -> List[int]:
        """PIDs of mkdocs serve processes already running on this machine."""
        pids = []
        for proc in psutil.process_iter(["pid", "cmdline"]):
            try:
                cmdline = proc.info["cmdline"] or []
            except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                continue
            if any(part.endswith("mkdocs") for part in cmdline) and "serve" in cmdline:
                pids.append(proc.info["pid"])
        return pids

    def open_browser_later(self, delay: float = 2.0) -> threading.Timer:
        timer = threading.Timer(delay, webbrowser.open, args=(self.config.preview_url,))
        timer.daemon = True
        timer.start()
        return timer

    def serve(self, open_browser: bool = True) -> int:
        """Start `mkdocs serve` in the foreground. Returns its exit code."""
        if not self.is_virtualenv_active():
            for line in VENV_INSTRUCTIONS:
                self.console.print(line)
            return 1

        mkdocs = self.require_tool("mkdocs")
        running = self.find_running_preview()
        if running:
            logger.warning(f"mkdocs serve already running (pid {', '.join(map(str, running))})")

        if open_browser:
            self.open_browser_later()

        cmd = [mkdocs, "serve", "--config-file", str(self.config.mkdocs_config)]
        logger.info(f"+ {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, cwd=self.config.root)
        except KeyboardInterrupt:
            return 0
        return result.returncode

    def linkcheck(self, extra_args: Optional[List[str]] = None) -> int:
        """Run lychee over the docs directory. Returns lychee's exit code."""
        lychee = self.require_tool(self.config.lychee)
        cmd = [lychee, "--no-progress", *(extra_args or []), str(self.config.docs_dir)]
        logger.info(f"+ {' '.join(cmd)}")
        result = subprocess.run(cmd, cwd=self.config.root)
        if result.returncode != 0:
            logger.error(f"lychee reported broken links (exit code {result.returncode})")
        return result.returncode
