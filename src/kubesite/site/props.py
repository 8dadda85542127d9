"""Dynamic properties of the synced pages."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import humanize

from kubesite.sync.sources import SyncSource
from kubesite.sync.transform import generated_header


@dataclass
class PageProps:
    dest: str
    url: str
    exists: bool
    size: Optional[int] = None
    modified: Optional[datetime] = None
    has_header: bool = False

    @property
    def size_text(self) -> str:
        return humanize.naturalsize(self.size) if self.size is not None else "-"

    def age_text(self, now: Optional[datetime] = None) -> str:
        if self.modified is None:
            return "-"
        return humanize.naturaltime((now or datetime.now()) - self.modified)


def page_props(docs_dir: Path, source: SyncSource) -> PageProps:
    path = docs_dir / source.dest
    if not path.is_file():
        return PageProps(source.dest, source.url, exists=False)
    stat = path.stat()
    with path.open("r", encoding="utf-8", errors="replace") as f:
        first_line = f.readline()
    return PageProps(
        source.dest,
        source.url,
        exists=True,
        size=stat.st_size,
        modified=datetime.fromtimestamp(stat.st_mtime),
        has_header=first_line == generated_header(source),
    )


def collect_props(docs_dir: Path, sources: List[SyncSource]) -> List[PageProps]:
    return [page_props(docs_dir, source) for source in sources]
