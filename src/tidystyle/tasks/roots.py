# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve search roots and the configuration that applies to each."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..cli.shared import CLILogger
from ..config import DEFAULT_SETTINGS, Settings, find_up, merge_settings, source_paths
from ..constants import MAX_CONFIG_DEPTH
from ..walker import PreparedRoot


def search_roots(paths: Sequence[str]) -> list[Path]:
    """Convert ``paths`` into search roots.

    An empty sequence yields the current directory. Order and duplicates are
    preserved and nothing is checked for existence here.
    """

    return [Path(path) for path in (paths or ["."])]


def load_configs(label: str, location: Path, *, logger: CLILogger) -> Settings:
    """Return the merged settings for ``location``.

    Args:
        label: Name used in the diagnostic log line.
        location: Canonical file or directory whose ancestors are searched.
        logger: Logger receiving the diagnostic line.

    Returns:
        Settings: Defaults overlaid with every discovered fragment, outermost
        first.

    Raises:
        ConfigError: If a discovered fragment is unreadable or invalid.
    """

    configs = find_up(location, MAX_CONFIG_DEPTH)
    if configs:
        sources = "\n".join(path for config in configs for path in source_paths(config))
        logger.debug(f"Using tidystyle configuration from {len(configs)} sources for {label}:\n{sources}")
    else:
        logger.debug(f"Using default tidystyle configuration for {label}")
    return merge_settings(DEFAULT_SETTINGS, *configs)


def _canonical(root: Path) -> Path:
    return root.resolve(strict=False)


def prepare_roots(paths: Sequence[str], *, logger: CLILogger, jobs: int | None = None) -> list[PreparedRoot]:
    """Resolve roots and load their configuration concurrently.

    Preparation is joined before returning, so no file is dispatched before
    its root's configuration is known.

    Args:
        paths: Raw path arguments.
        logger: Logger passed to :func:`load_configs`.
        jobs: Upper bound on concurrent root preparations.

    Returns:
        list[PreparedRoot]: Prepared roots in argument order.
    """

    roots = search_roots(paths)

    def prep_root(root: Path) -> PreparedRoot:
        canonical = _canonical(root)
        return PreparedRoot(
            settings=load_configs(str(root), canonical, logger=logger),
            root=root,
            canonical=canonical,
        )

    with ThreadPoolExecutor(max_workers=max(1, min(len(roots), jobs or len(roots)))) as executor:
        return list(executor.map(prep_root, roots))


__all__ = ["load_configs", "prepare_roots", "search_roots"]
