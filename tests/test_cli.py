"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from struct2schema.main import cli

from tests.helpers import normalize


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestGenerateCommand:
    """`struct2schema generate`."""

    def test_output_file(self, runner, user_file, tmp_path) -> None:
        output = tmp_path / "schema.sql"

        result = runner.invoke(cli, ["generate", str(user_file), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert normalize(output.read_text()) == (
            "CREATE TABLE IF NOT EXISTS User ( ID INTEGER, Name TEXT )"
        )

    def test_stdout(self, runner, user_file) -> None:
        result = runner.invoke(cli, ["--log-level", "ERROR", "generate", str(user_file)])

        assert result.exit_code == 0, result.output
        assert "CREATE TABLE IF NOT EXISTS User (" in result.output
        assert "  Name TEXT\n)" in result.output

    @pytest.mark.parametrize("flag", ["--db-type", "--dbType"])
    def test_mysql(self, runner, user_file, tmp_path, flag) -> None:
        output = tmp_path / "schema.sql"

        result = runner.invoke(
            cli, ["generate", flag, "mysql", "-o", str(output), str(user_file)]
        )

        assert result.exit_code == 0, result.output
        assert normalize(output.read_text()) == (
            "CREATE TABLE IF NOT EXISTS User ( ID INT, Name MEDIUMTEXT )"
        )

    def test_unknown_dialect(self, runner, user_file) -> None:
        result = runner.invoke(cli, ["generate", "--db-type", "oracle", str(user_file)])

        assert result.exit_code == 2
        assert "oracle" in result.output

    def test_requires_files(self, runner) -> None:
        result = runner.invoke(cli, ["generate"])

        assert result.exit_code == 2

    def test_parse_error(self, runner, write_go, user_file, tmp_path) -> None:
        """A broken file fails the run after earlier files were written."""
        broken = write_go("package models\n\ntype Broken struct {\n", "broken.go")
        output = tmp_path / "schema.sql"

        result = runner.invoke(
            cli, ["generate", "-o", str(output), str(user_file), str(broken)]
        )

        assert result.exit_code == 1
        assert "syntax error" in result.output
        assert "CREATE TABLE IF NOT EXISTS User" in output.read_text()

    def test_unsupported_field(self, runner, write_go) -> None:
        path = write_go(
            "package models\n\n// @struct2schema\ntype Doc struct {\n\tTags []string\n}\n"
        )

        result = runner.invoke(cli, ["generate", str(path)])

        assert result.exit_code == 1
        assert "Doc.Tags" in result.output

    def test_strict(self, runner, write_go) -> None:
        path = write_go(
            "package models\n\n// @struct2schema\ntype Flag struct {\n\tActive bool\n}\n"
        )

        lenient = runner.invoke(cli, ["generate", str(path)])
        strict = runner.invoke(cli, ["generate", "--strict", str(path)])

        assert lenient.exit_code == 0
        assert strict.exit_code == 1
        assert "Flag.Active" in strict.output

    def test_template(self, runner, user_file, tmp_path) -> None:
        template = tmp_path / "drop.j2"
        template.write_text("DROP TABLE IF EXISTS {{ table_name }};", encoding="utf-8")
        output = tmp_path / "drop.sql"

        result = runner.invoke(
            cli,
            ["generate", "--template", str(template), "-o", str(output), str(user_file)],
        )

        assert result.exit_code == 0, result.output
        assert output.read_text() == "DROP TABLE IF EXISTS User;\n"


class TestTypesCommand:
    """`struct2schema types`."""

    def test_default_dialect(self, runner) -> None:
        result = runner.invoke(cli, ["types"])

        assert result.exit_code == 0
        assert "Dialect: sqlite3" in result.output
        assert "string     TEXT" in result.output

    def test_mysql(self, runner) -> None:
        result = runner.invoke(cli, ["types", "--db-type", "mysql"])

        assert result.exit_code == 0
        assert "int64      BIGINT" in result.output
        assert "byte       TINYINT" in result.output
