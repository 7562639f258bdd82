"""Build the per-render resource table from a parsed document."""

from __future__ import annotations

import logging
import posixpath
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, TypeVar

from cssembed.model.css import Document, Reference

__all__ = ["load_resources", "resource_path"]

logger = logging.getLogger(__name__)

R = TypeVar("R")


def resource_path(resource_dir: str, reference: Reference) -> str:
    """Join a reference onto the directory it is relative to."""
    return posixpath.join(resource_dir, reference.path)


def load_resources(
    document: Document,
    resource_dir: str,
    loader: Callable[[str], R | None],
    max_workers: int | None = None,
) -> dict[Reference, R]:
    """Load every distinct reference in *document* exactly once.

    *loader* receives the reference joined onto *resource_dir* and returns the
    loaded resource, or ``None`` when it cannot be found. Misses are left out
    of the returned table. With ``max_workers`` greater than one, loads run on
    a thread pool.
    """
    references = document.distinct_references()
    paths = [resource_path(resource_dir, ref) for ref in references]

    if max_workers and max_workers > 1 and len(references) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(loader, paths))
    else:
        results = [loader(path) for path in paths]

    table: dict[Reference, R] = {}
    for ref, path, result in zip(references, paths, results):
        if result is None:
            logger.debug("Resource not found: %s", path)
            continue
        table[ref] = result
    logger.debug("Loaded %d of %d resource(s)", len(table), len(references))
    return table
