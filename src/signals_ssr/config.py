"""Settings for the HTTP layer, read from the environment or an env file."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from starlette.config import Config

DEFAULT_ENTRY = "src/entry-client.ts"


@dataclass
class Settings:
    dist_dir: Path
    manifest_path: Path
    entry: str = DEFAULT_ENTRY
    title: str = "signals SSR"
    lang: str = "en"
    debug: bool = False

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "Settings":
        """Load settings from ``SIGNALS_SSR_*`` variables.

        Values in the process environment win over the env file.
        """
        config = Config(env_file) if env_file else Config()

        dist_dir = Path(config("SIGNALS_SSR_DIST_DIR", default="dist"))
        manifest = config("SIGNALS_SSR_MANIFEST", default=None)
        manifest_path = Path(manifest) if manifest else dist_dir / ".vite" / "manifest.json"

        return cls(
            dist_dir=dist_dir,
            manifest_path=manifest_path,
            entry=config("SIGNALS_SSR_ENTRY", default=DEFAULT_ENTRY),
            title=config("SIGNALS_SSR_TITLE", default="signals SSR"),
            lang=config("SIGNALS_SSR_LANG", default="en"),
            debug=config("SIGNALS_SSR_DEBUG", cast=bool, default=False),
        )
