import json

from click.testing import CliRunner

from dbjsonschema.cli import main


def test_cli_prints_document(tables_path):
    runner = CliRunner()
    result = runner.invoke(main, ["--columns", str(tables_path), "--source", "Address"])

    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert doc["required"] == ["id", "street"]
    assert list(doc["properties"]) == ["id", "street", "postcode", "created_at"]


def test_cli_with_options(tables_path, options_path):
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "--columns",
            str(tables_path),
            "--source",
            "Address",
            "--options",
            str(options_path),
        ],
    )

    assert result.exit_code == 0, result.output
    doc = json.loads(result.output)
    assert list(doc["properties"]) == ["id", "street_name", "postcode"]


def test_cli_writes_output_file(tables_path, tmp_path):
    output = tmp_path / "address.json"
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "--columns",
            str(tables_path),
            "--source",
            "Address",
            "--output",
            str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text())["type"] == "object"


def test_cli_format_map(tables_path, tmp_path):
    format_map = tmp_path / "formats.yaml"
    format_map.write_text("datetime: date-time\n")
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "--columns",
            str(tables_path),
            "--source",
            "Address",
            "--format-map",
            str(format_map),
        ],
    )

    assert result.exit_code == 0, result.output
    created_at = json.loads(result.output)["properties"]["created_at"]
    assert created_at["format"] == "date-time"
    assert "maxLength" not in created_at


def test_cli_reports_unknown_type(tables_path):
    runner = CliRunner()
    result = runner.invoke(main, ["--columns", str(tables_path), "--source", "Broken"])

    assert result.exit_code == 1
    assert "unknown data type - frobnicate" in result.output


def test_cli_reports_unknown_source(tables_path):
    runner = CliRunner()
    result = runner.invoke(main, ["--columns", str(tables_path), "--source", "Nope"])

    assert result.exit_code == 1
    assert "unknown source 'Nope'" in result.output
