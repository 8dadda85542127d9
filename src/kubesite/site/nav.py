"""Navigation coverage for the mkdocs site."""

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional

from loguru import logger

from kubesite.site.mkdocs import flatten_nav, load_mkdocs_config


@dataclass
class NavReport:
    pages: List[str] = field(default_factory=list)
    resolved: Dict[str, Path] = field(default_factory=dict)
    broken: List[str] = field(default_factory=list)
    uncovered: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.broken


def resolve_page(docs_dir: Path, page: str) -> Optional[Path]:
    """Find a nav page under docs_dir.

    Exact paths win. Otherwise the page is looked up by its relative path in
    any subdirectory, the way roamlinks resolves pages like syncs/*.md.
    """
    page = page.strip()
    if not page or PurePosixPath(page).is_absolute():
        return None
    exact = docs_dir / page
    if exact.is_file():
        return exact
    suffix = "/" + page
    matches = sorted(p for p in docs_dir.rglob("*") if p.is_file() and p.relative_to(docs_dir).as_posix().endswith(suffix))
    if len(matches) > 1:
        logger.warning(f"Nav page '{page}' is ambiguous: {', '.join(str(m.relative_to(docs_dir)) for m in matches)}")
    return matches[0] if matches else None


def _is_blog_post(relative: Path) -> bool:
    return relative.parts[0] == "blog" and relative.name != "index.md"


def check_nav(mkdocs_config: Path, docs_dir: Path) -> NavReport:
    config = load_mkdocs_config(mkdocs_config)
    report = NavReport(pages=flatten_nav(config.get("nav")))

    for page in report.pages:
        path = resolve_page(docs_dir, page)
        if path is None:
            report.broken.append(page)
        else:
            report.resolved[page] = path

    covered = {path.resolve() for path in report.resolved.values()}
    for path in sorted(docs_dir.rglob("*.md")):
        relative = path.relative_to(docs_dir)
        if path.resolve() in covered or _is_blog_post(relative):
            continue
        report.uncovered.append(relative.as_posix())

    logger.debug(f"Nav check: {len(report.pages)} pages, {len(report.broken)} broken, {len(report.uncovered)} uncovered")
    return report
