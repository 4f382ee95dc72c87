"""
Frontend build discovery.

The bundle lands in different places depending on how the app is deployed
(repo checkout, container image, platform buildpack). We check an ordered
list of candidates and take the first directory that exists.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from core import settings

REPO_ROOT = Path(__file__).resolve().parents[2]
INDEX_FILE = "index.html"


@dataclass(frozen=True)
class FrontendBuild:
    candidates: list[Path]
    directory: Path | None

    @property
    def found(self) -> bool:
        return self.directory is not None

    @property
    def index_path(self) -> Path | None:
        if self.directory is None:
            return None
        return self.directory / INDEX_FILE


def candidate_paths() -> list[Path]:
    cwd = Path(os.getcwd())
    candidates: list[Path] = []
    override = settings.frontend_dist_override()
    if override:
        candidates.append(Path(override))
    candidates.extend(
        [
            REPO_ROOT / "frontend" / "dist",
            cwd / "frontend" / "dist",
            cwd / "dist",
            Path("/app/frontend/dist"),
        ]
    )

    # Keep order, drop duplicates (repo root is often the cwd).
    seen: set[Path] = set()
    unique: list[Path] = []
    for path in candidates:
        key = path.resolve()
        if key in seen:
            continue
        seen.add(key)
        unique.append(path)
    return unique


def resolve_build() -> FrontendBuild:
    candidates = candidate_paths()
    for path in candidates:
        if path.is_dir():
            return FrontendBuild(candidates=candidates, directory=path.resolve())
    return FrontendBuild(candidates=candidates, directory=None)


def resolve_asset(directory: Path, relative: str) -> Path | None:
    """
    File under `directory` for a request path, or None if missing or outside it.
    """
    target = (directory / relative.lstrip("/")).resolve()
    if not target.is_relative_to(directory) or not target.is_file():
        return None
    return target
