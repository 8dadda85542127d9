"""Reading the mkdocs site configuration."""

from pathlib import Path
from typing import Any, Dict, List

import yaml
from loguru import logger

from kubesite.errors import ConfigError


class MkdocsLoader(yaml.SafeLoader):
    """SafeLoader that keeps mkdocs' python and custom tags as plain strings."""


def _python_tag(loader, suffix, node):
    # e.g. !!python/name:pymdownx.slugs.uslugify
    return f"!!python/{suffix}"


def _custom_tag(loader, suffix, node):
    if isinstance(node, yaml.ScalarNode):
        return loader.construct_scalar(node)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node)
    return loader.construct_mapping(node)


MkdocsLoader.add_multi_constructor("tag:yaml.org,2002:python/", _python_tag)
MkdocsLoader.add_multi_constructor("!", _custom_tag)


def load_mkdocs_config(path: Path) -> Dict[str, Any]:
    """Load mkdocs.yml, raising ConfigError when it is missing or malformed."""
    if not path.exists():
        raise ConfigError(f"mkdocs config not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.load(f, Loader=MkdocsLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid mkdocs config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"mkdocs config {path} is not a mapping")
    logger.debug(f"Loaded mkdocs config from {path}")
    return data


def flatten_nav(nav: Any) -> List[str]:
    """Flatten an mkdocs nav tree into the page paths it references, in order.

    Entries are plain strings, ``{title: page}`` mappings or ``{section: [...]}``
    mappings nested to any depth. External links are skipped.
    """
    pages: List[str] = []
    if nav is None:
        return pages
    if isinstance(nav, str):
        if "://" not in nav:
            pages.append(nav)
        return pages
    if isinstance(nav, list):
        for item in nav:
            pages.extend(flatten_nav(item))
        return pages
    if isinstance(nav, dict):
        for value in nav.values():
            pages.extend(flatten_nav(value))
        return pages
    raise ConfigError(f"Unexpected nav entry: {nav!r}")
