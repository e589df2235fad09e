import pytest
from click.testing import CliRunner

from ..src.translation.translators import Translator


class StubTranslator(Translator):
    """Translator that never leaves the process."""

    name = "stub"

    def __init__(self, func=None, target_lang="es", source_lang="auto", mapping=None):
        super().__init__(target_lang, source_lang)
        self.func = func or (lambda texts: [mapping.get(t, t) for t in texts] if mapping else list(texts))
        self.batches = []
        self.closed = False

    def _translate_batch(self, texts):
        self.batches.append(list(texts))
        return self.func(texts)

    def close(self):
        self.closed = True


def upper(texts):
    return [t.upper() for t in texts]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep a real ~/.gootrago.yaml and GOOTRAGO_* variables out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for name in ("INPUT", "OUTPUT", "SOURCE", "TARGET", "PROJECT", "CREDENTIALS", "ADVANCED",
                 "CSV_COLUMN", "CSV_CSV_DELIMITER", "CSV_CSV_COMMENT", "CSV_HEADER"):
        monkeypatch.delenv(f"GOOTRAGO_{name}", raising=False)
    return home
