"""Lookup of built client assets in a Vite ``manifest.json``."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union


class ManifestError(Exception):
    """Raised when the build manifest is missing, unreadable or lacks an entry."""

    pass


@dataclass
class ManifestEntry:
    file: str
    name: str = ""
    src: str = ""
    is_entry: bool = False
    css: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ManifestEntry":
        return cls(
            file=data["file"],
            name=data.get("name", ""),
            src=data.get("src", ""),
            is_entry=bool(data.get("isEntry", False)),
            css=list(data.get("css", [])),
        )


class BuildManifest:
    """Mapping of source entry names to their built script and stylesheets."""

    def __init__(self, entries: Dict[str, ManifestEntry]):
        self.entries = entries

    @classmethod
    def load(cls, path: Union[str, Path]) -> "BuildManifest":
        path = Path(path)
        try:
            raw = json.loads(path.read_text("utf-8"))
        except FileNotFoundError as e:
            raise ManifestError(f"Build manifest not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ManifestError(f"Build manifest {path} is not valid JSON: {e}") from e

        if not isinstance(raw, dict):
            raise ManifestError(f"Build manifest {path} must be a JSON object")

        try:
            entries = {key: ManifestEntry.from_dict(value) for key, value in raw.items()}
        except (KeyError, TypeError, AttributeError) as e:
            raise ManifestError(f"Build manifest {path} has a malformed entry: {e}") from e
        return cls(entries)

    def entry(self, name: str) -> ManifestEntry:
        try:
            return self.entries[name]
        except KeyError:
            raise ManifestError(f"Entry '{name}' not found in build manifest") from None

    def asset_url(self, file: str) -> str:
        """Public URL of a built file (manifest paths are relative to dist)."""
        return file if file.startswith("/") else f"/{file}"
