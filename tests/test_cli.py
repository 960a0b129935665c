"""CLI smoke tests using typer's CliRunner."""

import json

from typer.testing import CliRunner

from namesmith.cli.app import app

runner = CliRunner()


def _write_table(path, lines):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestVersionFlag:
    """Test the --version flag."""

    def test_version_output(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "namesmith" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate_one(self):
        result = runner.invoke(app, ["generate", "--seed", "1"])
        assert result.exit_code == 0
        assert len(result.output.split()) >= 2

    def test_generate_json(self):
        result = runner.invoke(app, ["--json", "generate", "-n", "5", "--seed", "7"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["status"] == "success"
        assert len(payload["names"]) == 5
        assert payload["rarity"] == 50.0
        assert payload["given_bias"] == 1.0

    def test_seed_reproducible(self):
        args = ["--json", "generate", "-n", "10", "--seed", "42"]
        first = json.loads(runner.invoke(app, args).output)["names"]
        second = json.loads(runner.invoke(app, args).output)["names"]
        assert first == second

    def test_numbered_list(self):
        result = runner.invoke(app, ["generate", "-n", "3", "--seed", "3"])
        assert result.exit_code == 0
        assert "1. " in result.output
        assert "3. " in result.output

    def test_title_case_applied(self, tmp_path):
        given = _write_table(tmp_path / "g.csv", ["mARY,5"])
        surname = _write_table(tmp_path / "s.csv", ["SMITH,5"])
        result = runner.invoke(
            app,
            ["generate", "--given-file", str(given), "--surname-file", str(surname)],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "Mary Smith"

    def test_no_title_case(self, tmp_path):
        given = _write_table(tmp_path / "g.csv", ["mARY,5"])
        surname = _write_table(tmp_path / "s.csv", ["SMITH,5"])
        result = runner.invoke(
            app,
            [
                "generate",
                "--no-title-case",
                "--given-file",
                str(given),
                "--surname-file",
                str(surname),
            ],
        )
        assert result.output.strip() == "mARY SMITH"

    def test_bias_tokens(self, tmp_path):
        given = _write_table(tmp_path / "g.csv", ["Common,1000", "Rare,1"])
        surname = _write_table(tmp_path / "s.csv", ["Common,1000", "Rare,1"])
        result = runner.invoke(
            app,
            [
                "--json",
                "generate",
                "-n",
                "20",
                "--seed",
                "5",
                "--given-file",
                str(given),
                "--surname-file",
                str(surname),
                "--",
                "3",
                "-3",
            ],
        )
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["given_bias"] == 3.0
        assert payload["surname_bias"] == -3.0
        assert all(name == "Common Rare" for name in payload["names"])

    def test_keywords_select_datasets(self):
        result = runner.invoke(
            app, ["--json", "generate", "--seed", "1", "female", "hispanic"]
        )
        payload = json.loads(result.output)
        assert payload["given_dataset"].endswith("female.txt")
        assert payload["surname_dataset"].endswith("hispanic.csv")

    def test_rarity_option(self):
        result = runner.invoke(app, ["--json", "generate", "-r", "100", "--seed", "1"])
        payload = json.loads(result.output)
        assert payload["given_bias"] == -1.0
        assert payload["rarity"] == 100.0

    def test_rarity_and_bias_conflict(self):
        result = runner.invoke(app, ["generate", "-r", "10", "1.5"])
        assert result.exit_code == 1
        assert "not both" in result.output

    def test_rarity_out_of_range(self):
        result = runner.invoke(app, ["generate", "-r", "150"])
        assert result.exit_code == 1

    def test_unknown_token_warns(self):
        result = runner.invoke(app, ["--json", "generate", "--seed", "1", "martian"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert "martian" in payload["warnings"][0]["message"]

    def test_missing_file(self, tmp_path):
        result = runner.invoke(
            app, ["generate", "--given-file", str(tmp_path / "missing.csv")]
        )
        assert result.exit_code == 3

    def test_parse_error(self, tmp_path):
        given = _write_table(tmp_path / "g.csv", ["name,count", "Anna,5"])
        result = runner.invoke(app, ["generate", "--given-file", str(given)])
        assert result.exit_code == 4
        assert "Invalid count" in result.output

    def test_degenerate_distribution(self, tmp_path):
        given = _write_table(tmp_path / "g.csv", ["Nobody,0", "Anna,5"])
        result = runner.invoke(
            app, ["generate", "--given-file", str(given), "-r", "100"]
        )
        assert result.exit_code == 4

    def test_empty_dataset(self, tmp_path):
        given = _write_table(tmp_path / "g.csv", ["just a line"])
        result = runner.invoke(app, ["generate", "--given-file", str(given)])
        assert result.exit_code == 4

    def test_output_file(self, tmp_path):
        out_path = tmp_path / "out" / "names.txt"
        result = runner.invoke(
            app, ["generate", "-n", "4", "--seed", "2", "-o", str(out_path)]
        )
        assert result.exit_code == 0
        assert len(out_path.read_text(encoding="utf-8").splitlines()) == 4

    def test_non_utf8_file(self, tmp_path):
        given = tmp_path / "g.csv"
        given.write_bytes(b"Ren\xe9e,5\n")
        result = runner.invoke(app, ["generate", "--given-file", str(given)])
        assert result.exit_code == 4
        assert "not valid UTF-8" in result.output

    def test_total_weight_overflow(self, tmp_path):
        given = _write_table(tmp_path / "g.csv", ["A,10", "B,10"])
        result = runner.invoke(
            app, ["generate", "--given-file", str(given), "--", "308"]
        )
        assert result.exit_code == 4
        assert "overflows" in result.output

    def test_unwritable_output(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        result = runner.invoke(
            app, ["generate", "--seed", "1", "-o", str(blocker / "names.txt")]
        )
        assert result.exit_code == 1
        assert "Could not write" in result.output

    def test_config_defaults_used(self):
        result = runner.invoke(app, ["config", "set", "defaults.count", "3"])
        assert result.exit_code == 0
        result = runner.invoke(app, ["--json", "generate", "--seed", "1"])
        assert len(json.loads(result.output)["names"]) == 3


class TestInspectCommand:
    """Tests for the inspect command."""

    def test_inspect_table(self, tmp_path):
        path = _write_table(tmp_path / "names.csv", ["Anna,100", "Maisha,1"])
        result = runner.invoke(app, ["inspect", str(path)])
        assert result.exit_code == 0
        assert "Anna" in result.output
        assert "99.01%" in result.output

    def test_inspect_json_bias_zero(self, tmp_path):
        path = _write_table(tmp_path / "names.csv", ["A,10", "B,10"])
        result = runner.invoke(app, ["--json", "inspect", str(path), "--bias", "0"])
        payload = json.loads(result.output)
        assert payload["entries"][0]["Probability"] == "50.00%"
        assert payload["bias"] == 0.0

    def test_inspect_missing(self, tmp_path):
        result = runner.invoke(app, ["inspect", str(tmp_path / "x.csv")])
        assert result.exit_code == 3


class TestDatasetsCommand:
    def test_lists_bundled(self):
        result = runner.invoke(app, ["--json", "datasets"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        keys = {(row["Kind"], row["Keyword"]) for row in payload["datasets"]}
        assert ("given", "female") in keys
        assert ("surname", "hispanic") in keys
        assert all(row["Entries"] not in ("missing", "invalid") for row in payload["datasets"])

    def test_non_utf8_table_marked_invalid(self, tmp_path, monkeypatch):
        data_dir = tmp_path / "data"
        bad = data_dir / "given_names" / "all.txt"
        bad.parent.mkdir(parents=True)
        bad.write_bytes(b"Ren\xe9e,5\n")
        monkeypatch.setenv("NAMESMITH_DATA_DIR", str(data_dir))
        result = runner.invoke(app, ["--json", "datasets"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        entries = {
            (row["Kind"], row["Keyword"]): row["Entries"] for row in payload["datasets"]
        }
        assert entries[("given", "all")] == "invalid"
        assert entries[("given", "female")] == "missing"
        assert "not valid UTF-8" in payload["warnings"][0]["message"]


class TestConfigCommand:
    """Tests for the config command."""

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Sources" in result.output
        assert "Defaults" in result.output

    def test_config_set_and_reset(self, isolated_config):
        result = runner.invoke(app, ["config", "set", "defaults.rarity", "80"])
        assert result.exit_code == 0
        assert json.loads(isolated_config.read_text())["defaults"]["rarity"] == 80.0

        result = runner.invoke(app, ["config", "reset"])
        assert result.exit_code == 0
        assert not isolated_config.exists()

    def test_config_set_invalid_key(self):
        result = runner.invoke(app, ["config", "set", "invalid.key", "value"])
        assert result.exit_code == 1
        assert "Unknown key" in result.output

    def test_config_set_invalid_rarity(self):
        result = runner.invoke(app, ["config", "set", "defaults.rarity", "101"])
        assert result.exit_code == 1
        assert "Invalid rarity" in result.output

    def test_config_set_invalid_bool(self):
        result = runner.invoke(app, ["config", "set", "defaults.title_case", "maybe"])
        assert result.exit_code == 1

    def test_config_set_missing_args(self):
        result = runner.invoke(app, ["config", "set"])
        assert result.exit_code == 1

    def test_config_unknown_action(self):
        result = runner.invoke(app, ["config", "unknown_action"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output
