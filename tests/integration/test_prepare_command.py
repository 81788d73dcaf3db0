"""CLI tests for the `prepare`, `detect` and `dialects` commands."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from whoisprep.cli import app


def test_prepare_prints_canonical_text(whois_sample_path) -> None:
    """`prepare` should print the normalized response to stdout."""

    runner = CliRunner()

    result = runner.invoke(app, ["prepare", str(whois_sample_path("fr"))])

    assert result.exit_code == 0, result.output
    assert "registrar name: EXAMPLE REGISTRAR" in result.output
    assert "admin nic-hdl: AD1-FRNIC" in result.output
    assert "DNSSEC: signed" in result.output


def test_prepare_writes_output_file_and_report(whois_sample_path, tmp_path: Path) -> None:
    """`--out` should write the text and `--report` should summarize dispatch."""

    out_path = tmp_path / "prepared" / "example.hk.txt"
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["prepare", str(whois_sample_path("hk")), "--out", str(out_path), "--report"],
    )

    assert result.exit_code == 0, result.output
    written = out_path.read_text(encoding="utf-8")
    assert "Admin Given name: Chan Tai Man\n" in written
    assert written.endswith("Expiry Date: 01-01-2030\n")
    assert "TLD: hk" in result.output
    assert "Dialect: hk" in result.output


def test_prepare_tld_override_forces_dialect(tmp_path: Path) -> None:
    """`--tld` should apply a dialect to text without a domain line."""

    input_path = tmp_path / "nominet.txt"
    input_path.write_text("    URL: http://example.co.uk\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["prepare", str(input_path), "--tld", "UK"])

    assert result.exit_code == 0, result.output
    assert "Registrar URL: http://example.co.uk" in result.output


def test_prepare_reads_stdin() -> None:
    """`-` should read the response from standard input."""

    runner = CliRunner()

    result = runner.invoke(
        app,
        ["prepare", "-"],
        input="person: John Smith\ndomain: EXAMPLE.RU\n",
    )

    assert result.exit_code == 0, result.output
    assert "Registrant Name: John Smith" in result.output


def test_prepare_uses_yaml_config(whois_sample_path, tmp_path: Path) -> None:
    """`--config` should supply the input path and report flag."""

    config_path = tmp_path / "whoisprep.yaml"
    config_path.write_text(
        f"input: {whois_sample_path('ch')}\nreport: true\n",
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(app, ["prepare", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "Registrant organization: Acme AG" in result.output
    assert "Dialect: ch" in result.output


def test_prepare_reports_missing_input_file(tmp_path: Path) -> None:
    """A missing input should fail at the `read` stage with a hint."""

    runner = CliRunner()

    result = runner.invoke(app, ["prepare", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "prepare failed at stage `read`" in result.output
    assert "Hint: Verify the WHOIS response file exists." in result.output


def test_prepare_reports_unsupported_tld_override(whois_sample_path) -> None:
    """An unknown `--tld` should fail at the `config` stage."""

    runner = CliRunner()

    result = runner.invoke(app, ["prepare", str(whois_sample_path("com")), "--tld", "com"])

    assert result.exit_code == 1
    assert "prepare failed at stage `config`" in result.output
    assert "whoisprep dialects" in result.output


def test_prepare_reports_missing_config_file(tmp_path: Path) -> None:
    """A missing `--config` path should fail at the `config` stage."""

    runner = CliRunner()

    result = runner.invoke(app, ["prepare", "--config", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1
    assert "prepare failed at stage `config`: Config file not found" in result.output


def test_prepare_requires_input_without_config() -> None:
    """Omitting both input and config should fail with a hint."""

    runner = CliRunner()

    result = runner.invoke(app, ["prepare"], env={"WHOISPREP_INPUT": None})

    assert result.exit_code == 1
    assert "Missing input WHOIS response." in result.output


def test_prepare_falls_back_to_environment_config(whois_sample_path) -> None:
    """Without input or config, `WHOISPREP_*` variables should drive the run."""

    runner = CliRunner()

    result = runner.invoke(
        app,
        ["prepare"],
        env={
            "WHOISPREP_INPUT": str(whois_sample_path("jp")),
            "WHOISPREP_TLD": "jp",
            "WHOISPREP_REPORT": "yes",
        },
    )

    assert result.exit_code == 0, result.output
    assert "Dialect: jp" in result.output


def test_detect_prints_tld_and_dialect(whois_sample_path) -> None:
    """`detect` should name the TLD and the transformer that would run."""

    runner = CliRunner()

    detected = runner.invoke(app, ["detect", str(whois_sample_path("jp"))])
    passthrough = runner.invoke(app, ["detect", str(whois_sample_path("com"))])

    assert detected.exit_code == 0
    assert "TLD: jp" in detected.output
    assert "Dialect: jp" in detected.output
    assert "TLD: com" in passthrough.output
    assert "Dialect: (pass-through)" in passthrough.output


def test_dialects_lists_aliases() -> None:
    """`dialects` should list every TLD with its transformer."""

    runner = CliRunner()

    result = runner.invoke(app, ["dialects"])

    assert result.exit_code == 0
    rows = result.output.strip().split("\n")
    assert len(rows) == 18
    assert "wf\tfr" in rows
    assert "su\tru" in rows
    assert "edu\tedu" in rows
