"""Sequential, all-or-nothing sync of upstream Markdown into docs/."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger

from kubesite.errors import KubesiteError, SyncError
from kubesite.sync.client import UpstreamClient
from kubesite.sync.sources import SyncSource
from kubesite.sync.transform import render


@dataclass
class SyncResult:
    dest: str
    path: Path
    size: int
    changed: bool
    written: bool


def same_content(path: Path, text: str) -> bool:
    """Byte comparison, so pages that are not valid UTF-8 count as changed."""
    return path.is_file() and path.read_bytes() == text.encode("utf-8")


def write_if_changed(path: Path, text: str) -> bool:
    """Write text to path, creating parents. Returns whether the content changed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if same_content(path, text):
        return False
    path.write_bytes(text.encode("utf-8"))
    return True


class ContentSyncer:
    """Fetches each source in order and writes it under docs_dir.

    The first failure aborts the run with SyncError. Files written before the
    failure are left in place.
    """

    def __init__(self, docs_dir: Path, client: Optional[UpstreamClient] = None, dry_run: bool = False):
        self.docs_dir = Path(docs_dir)
        self.client = client or UpstreamClient()
        self.dry_run = dry_run

    def sync_one(self, source: SyncSource) -> SyncResult:
        path = self.docs_dir / source.dest
        logger.info(f"+ {source.url} -> {path}")
        text = render(source, self.client.fetch(source.url))
        size = len(text.encode("utf-8"))

        if self.dry_run:
            changed = not same_content(path, text)
            return SyncResult(source.dest, path, size, changed, written=False)

        changed = write_if_changed(path, text)
        if changed:
            logger.success(f"Updated {source.dest} ({size} bytes)")
        else:
            logger.info(f"Unchanged {source.dest}")
        return SyncResult(source.dest, path, size, changed, written=changed)

    def sync_all(self, sources: Iterable[SyncSource]) -> List[SyncResult]:
        results = []
        for source in sources:
            try:
                results.append(self.sync_one(source))
            except (KubesiteError, OSError) as e:
                logger.error(f"Sync failed for {source.dest}: {e}")
                raise SyncError(source.dest, e) from e
        return results
