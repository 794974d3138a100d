"""
Tests for CLI commands — build, generator check/clone, serve, global options.
"""

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from kssgen.main import cli


class TestCLIGlobal:

    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build style guides" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestBuildCommand:

    def _args(self, tmp_path: Path, *extra: str) -> list[str]:
        return [
            "build",
            "--source", str(tmp_path / "css"),
            "--destination", str(tmp_path / "out"),
            "--traverser", "kss_stubs:stub_traverse",
            *extra,
        ]

    def test_build_with_default_generator(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, self._args(tmp_path))
        assert result.exit_code == 0, result.output
        assert "Style guide generated" in result.output

        data = json.loads((tmp_path / "out" / "styleguide.json").read_text())
        assert data["sources"] == [str(tmp_path / "css")]

    def test_build_json_output(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, self._args(tmp_path, "--json"))
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["generator"] == "JsonGenerator"
        assert data["state"] == "generated"

    def test_generator_option(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, self._args(tmp_path, "-O", "indent=0"))
        assert result.exit_code == 0, result.output
        text = (tmp_path / "out" / "styleguide.json").read_text()
        assert text.startswith('{\n"sections"')

    def test_unknown_generator_option(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, self._args(tmp_path, "-O", "theme=dark"))
        assert result.exit_code == 1
        assert "Unknown generator option" in result.output

    def test_traversal_failure_exits_1(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, [
            "build", "--source", "css",
            "--destination", str(tmp_path / "out"),
            "--traverser", "kss_stubs:failing_traverse",
        ])
        assert result.exit_code == 1
        assert "Unparseable source" in result.output
        assert not (tmp_path / "out").exists()

    def test_missing_traverser(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, ["build", "--destination", str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "No traversal routine" in result.output

    def test_bad_generator_path(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, self._args(tmp_path, "--generator", "nowhere:gen"))
        assert result.exit_code == 1
        assert "Cannot import module 'nowhere'" in result.output

    def test_config_file(self, tmp_path: Path):
        config = tmp_path / "kss-config.yml"
        config.write_text(textwrap.dedent("""\
            source: css
            destination: public
            traverser: kss_stubs:stub_traverse
            mask: "*.less"
        """))
        result = CliRunner().invoke(cli, ["--config", str(config), "build"])
        assert result.exit_code == 0, result.output
        data = json.loads((tmp_path / "public" / "styleguide.json").read_text())
        assert data["mask"] == "*.less"

    def test_config_file_generator_option_survives(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "kss-config.yml").write_text(textwrap.dedent("""\
            destination: public
            traverser: kss_stubs:stub_traverse
            indent: 4
        """))
        result = CliRunner().invoke(cli, ["build"])
        assert result.exit_code == 0, result.output
        text = (tmp_path / "public" / "styleguide.json").read_text()
        assert text.startswith('{\n    "sections"')

    def test_option_flag_overrides_config_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "kss-config.yml").write_text(textwrap.dedent("""\
            destination: public
            traverser: kss_stubs:stub_traverse
            indent: 4
        """))
        result = CliRunner().invoke(cli, ["build", "-O", "indent=1"])
        assert result.exit_code == 0, result.output
        text = (tmp_path / "public" / "styleguide.json").read_text()
        assert text.startswith('{\n "sections"')

    def test_config_template_seeds_destination(self, tmp_path: Path, template_dir: Path):
        config = tmp_path / "kss-config.yml"
        config.write_text(textwrap.dedent("""\
            destination: public
            template: template
            traverser: kss_stubs:stub_traverse
        """))
        result = CliRunner().invoke(cli, ["--config", str(config), "build"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "public" / "index.html").is_file()
        assert (tmp_path / "public" / "styleguide.json").is_file()
        assert not (tmp_path / "public" / ".git").exists()

        again = CliRunner().invoke(cli, ["--config", str(config), "build"])
        assert again.exit_code == 0, again.output

    def test_missing_config_file(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ["--config", str(tmp_path / "nope.yml"), "build"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_init_clones_template(self, tmp_path: Path, template_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, self._args(tmp_path, "--init", str(template_dir)))
        assert result.exit_code == 0, result.output
        assert (tmp_path / "out" / "index.html").is_file()
        assert (tmp_path / "out" / "styleguide.json").is_file()
        assert not (tmp_path / "out" / ".git").exists()


class TestGeneratorCommands:

    def test_check_default_generator(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, ["generator", "check"])
        assert result.exit_code == 0, result.output
        assert "JsonGenerator implements generator API 3.0" in result.output
        assert "indent [number]" in result.output

    def test_check_json(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = CliRunner().invoke(cli, ["generator", "check", "--json"])
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["compatible"] is True
        assert data["options"]["indent"]["default"] == 2

    def test_check_versionless(self):
        result = CliRunner().invoke(cli, ["generator", "check", "-g", "kss_stubs:VersionlessGenerator"])
        assert result.exit_code == 1
        assert "incompatible with StyleguideGenerator API 3.0" in result.output

    def test_check_not_a_generator(self):
        result = CliRunner().invoke(cli, ["generator", "check", "-g", "kss_stubs:NotAGenerator", "--json"])
        assert result.exit_code == 1
        assert "not a StyleguideGenerator" in json.loads(result.output)["error"]

    def test_clone(self, tmp_path: Path, template_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        dest = tmp_path / "my-theme"
        result = CliRunner().invoke(cli, ["generator", "clone", str(template_dir), str(dest)])
        assert result.exit_code == 0, result.output
        assert (dest / "assets" / "css" / "kss.css").is_file()

    def test_clone_existing(self, tmp_path: Path, template_dir: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        dest = tmp_path / "my-theme"
        dest.mkdir()
        result = CliRunner().invoke(cli, ["generator", "clone", str(template_dir), str(dest)])
        assert result.exit_code == 1
        assert "already exists" in result.output


class TestServeCommand:

    def test_missing_output(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ["serve", "--destination", str(tmp_path / "none")])
        assert result.exit_code == 1
        assert "kssgen build" in result.output

    def test_runs_server(self, tmp_path: Path, monkeypatch):
        calls = {}

        def fake_run_server(app, host, port, debug):
            calls.update(root=app.config["SITE_ROOT"], host=host, port=port)

        monkeypatch.setattr("kssgen.ui.web.server.run_server", fake_run_server)
        result = CliRunner().invoke(cli, ["serve", "-d", str(tmp_path), "-p", "9001"])
        assert result.exit_code == 0, result.output
        assert calls == {"root": str(tmp_path.resolve()), "host": "127.0.0.1", "port": 9001}
