"""Tests für das Konfigurationssystem und die CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from config.schema import ExplorerConfig
from config.manager import ConfigManager


# ─── PYDANTIC-VALIDIERUNG ─────────────────────────────────────────────────────

class TestExplorerConfig:
    def test_defaults(self):
        """Default-Config: alle Anzeigen an, Log-Level WARNING."""
        config = ExplorerConfig()
        assert config.show_banner is True
        assert config.show_path_preview is True
        assert config.show_path_summary is True
        assert config.log_level == "WARNING"

    def test_log_level_normalized(self):
        assert ExplorerConfig(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_raises(self):
        """Unbekanntes Log-Level → Validierungsfehler."""
        with pytest.raises(ValidationError):
            ExplorerConfig(log_level="LOUD")


# ─── YAML SPEICHERN / LADEN ───────────────────────────────────────────────────

def _manager(tmp_path: Path) -> ConfigManager:
    mgr = ConfigManager()
    mgr.CONFIG_DIR = tmp_path
    mgr.DEFAULT_CONFIG = tmp_path / "explorer_config.yaml"
    return mgr


class TestConfigManager:
    def test_save_and_load_roundtrip(self, tmp_path: Path):
        """Config speichern, laden und validieren — vollständiger Roundtrip."""
        config = ExplorerConfig(show_banner=False, log_level="INFO")
        mgr = _manager(tmp_path)

        mgr.save(config)
        assert mgr.DEFAULT_CONFIG.exists()

        loaded = mgr.load(mgr.DEFAULT_CONFIG)
        assert loaded == config

    def test_saved_file_has_comments(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.save(ExplorerConfig())
        text = mgr.DEFAULT_CONFIG.read_text(encoding="utf-8")
        assert text.startswith("# ====")
        assert "# Begrüßungsbanner anzeigen" in text

    def test_missing_default_file_gives_defaults(self, tmp_path: Path):
        """Ohne Datei gelten die Defaults (die Datei ist optional)."""
        mgr = _manager(tmp_path)
        assert mgr.first_run_check() is True
        assert mgr.load() == ExplorerConfig()

    def test_first_run_check_with_file(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.save(ExplorerConfig())
        assert mgr.first_run_check() is False

    def test_load_explicit_nonexistent_raises(self, tmp_path: Path):
        """Laden einer explizit angegebenen, fehlenden Datei → FileNotFoundError."""
        mgr = ConfigManager()
        with pytest.raises(FileNotFoundError):
            mgr.load(tmp_path / "not_there.yaml")

    def test_partial_file_fills_defaults(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.DEFAULT_CONFIG.write_text("show_banner: false\n", encoding="utf-8")
        config = mgr.load()
        assert config.show_banner is False
        assert config.show_path_summary is True

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.DEFAULT_CONFIG.write_text("", encoding="utf-8")
        assert mgr.load() == ExplorerConfig()

    def test_invalid_file_raises_value_error(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.DEFAULT_CONFIG.write_text("log_level: LOUD\n", encoding="utf-8")
        with pytest.raises(ValueError, match="ungültig"):
            mgr.load()


# ─── MAIN.PY CLI ──────────────────────────────────────────────────────────────

def _write_config(text: str) -> Path:
    target = Path("config/explorer_config.yaml")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    return target


class TestCli:
    @pytest.fixture(autouse=True)
    def _workdir(self, tmp_path: Path, monkeypatch):
        """Jeder CLI-Test läuft in einem leeren Arbeitsverzeichnis."""
        monkeypatch.chdir(tmp_path)

    def test_help(self):
        """main.py --help gibt Usage aus."""
        from main import cli
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_default_runs_exploration(self):
        """Ohne Befehl startet die Erkundung; e, e, e endet in der Biblioteca."""
        from main import cli
        runner = CliRunner()
        result = runner.invoke(cli, [], input="e\ne\ne\n")
        assert result.exit_code == 0
        assert "DETECTIVE QUEST" in result.output
        assert "VOCÊ ESTÁ EM: Biblioteca" in result.output
        assert "FIM DA EXPLORAÇÃO" in result.output
        assert "Programa finalizado com sucesso." in result.output

    def test_explore_quit(self):
        """explore: d, d, s beendet im Jardim mit Exit-Code 0."""
        from main import cli
        runner = CliRunner()
        result = runner.invoke(cli, ["explore"], input="d\nd\ns\n")
        assert result.exit_code == 0
        assert "VOCÊ ESTÁ EM: Jardim" in result.output
        assert "Volte sempre!" in result.output
        assert "FIM DA EXPLORAÇÃO" not in result.output

    def test_explore_end_of_input(self):
        """Ende der Eingabe beendet die Erkundung regulär."""
        from main import cli
        runner = CliRunner()
        result = runner.invoke(cli, ["explore"], input="")
        assert result.exit_code == 0
        assert "Volte sempre!" in result.output

    def test_explore_without_banner(self):
        from main import cli
        _write_config("show_banner: false\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["explore"], input="s\n")
        assert result.exit_code == 0
        assert "BEM-VINDO" not in result.output

    def test_explore_invalid_config_aborts(self):
        """Ungültige Konfigurationsdatei → Fehlermeldung und Exit-Code 1."""
        from main import cli
        _write_config("log_level: LOUD\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["explore"], input="s\n")
        assert result.exit_code == 1
        assert "ungültig" in result.output

    def test_memory_error_exits_with_diagnostic(self, monkeypatch, capsys):
        """Speichermangel beim Aufbau der Mansão → Diagnose und Exit-Code 1."""
        import main
        import models.mansion

        def _out_of_memory():
            raise MemoryError

        monkeypatch.setattr(models.mansion, "build_mansion", _out_of_memory)
        monkeypatch.setattr("sys.argv", ["main.py", "explore"])
        with pytest.raises(SystemExit) as exc_info:
            main.main()
        assert exc_info.value.code == 1
        assert "Erro ao alocar memória" in capsys.readouterr().out

    def test_map(self):
        """map zeigt alle Räume der Mansão."""
        from main import cli
        runner = CliRunner()
        result = runner.invoke(cli, ["map"])
        assert result.exit_code == 0
        for name in ["Hall de Entrada", "Biblioteca", "Piscina",
                     "Banheiro Privativo"]:
            assert name in result.output
        assert "11 cômodos" in result.output

    def test_config_show_defaults(self):
        from main import cli
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "Defaults" in result.output
        assert "log_level" in result.output

    def test_config_init_creates_file(self):
        from main import cli
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 0
        assert Path("config/explorer_config.yaml").exists()

    def test_config_init_keeps_existing_file(self):
        """config init überschreibt nur nach Bestätigung."""
        from main import cli
        target = _write_config("show_banner: false\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["config", "init"], input="n\n")
        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8") == "show_banner: false\n"
