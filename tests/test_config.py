import shutil
import tempfile
import unittest
from pathlib import Path

import pytest

from signals_ssr.config import DEFAULT_ENTRY, Settings

ENV_KEYS = [
    "SIGNALS_SSR_DIST_DIR",
    "SIGNALS_SSR_MANIFEST",
    "SIGNALS_SSR_ENTRY",
    "SIGNALS_SSR_TITLE",
    "SIGNALS_SSR_LANG",
    "SIGNALS_SSR_DEBUG",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestSettings(unittest.TestCase):
    def setUp(self) -> None:
        self.test_dir = tempfile.mkdtemp()
        self.tmp_path = Path(self.test_dir).resolve()

    def tearDown(self) -> None:
        shutil.rmtree(self.test_dir)

    def test_defaults(self) -> None:
        settings = Settings.from_env()
        self.assertEqual(settings.dist_dir, Path("dist"))
        self.assertEqual(settings.manifest_path, Path("dist") / ".vite" / "manifest.json")
        self.assertEqual(settings.entry, DEFAULT_ENTRY)
        self.assertEqual(settings.lang, "en")
        self.assertFalse(settings.debug)

    def test_env_file(self) -> None:
        env_file = self.tmp_path / ".env"
        env_file.write_text(
            "SIGNALS_SSR_DIST_DIR=build\n"
            "SIGNALS_SSR_TITLE=From file\n"
            "SIGNALS_SSR_DEBUG=true\n",
            encoding="utf-8",
        )
        settings = Settings.from_env(env_file)
        self.assertEqual(settings.dist_dir, Path("build"))
        self.assertEqual(settings.manifest_path, Path("build") / ".vite" / "manifest.json")
        self.assertEqual(settings.title, "From file")
        self.assertTrue(settings.debug)


def test_environment_overrides_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SIGNALS_SSR_TITLE=From file\nSIGNALS_SSR_LANG=de\n", encoding="utf-8")
    monkeypatch.setenv("SIGNALS_SSR_TITLE", "From env")
    monkeypatch.setenv("SIGNALS_SSR_MANIFEST", str(tmp_path / "manifest.json"))

    settings = Settings.from_env(env_file)
    assert settings.title == "From env"
    assert settings.lang == "de"
    assert settings.manifest_path == tmp_path / "manifest.json"
