"""
Tests for jpaz/cli.py - Command-line interface.

Covers:
- Report flags (-f, -c, -u, -e) and their output format
- JSON output
- Input errors (exit 1) and argument errors (exit 2)
- No-argument help and --version
"""

import io
import sys

import pytest

import json_utils as json
from jpaz import __version__
from jpaz.cli import main


def _run(argv, capsys):
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestReports:
    """Text output for the report flags."""

    def test_count_report(self, sample_file, capsys):
        code, out, _ = _run([str(sample_file), "-c"], capsys)
        assert code == 0
        assert out.splitlines() == [
            "Hiragana 24 52.17%",
            "Katakana 5 10.87%",
            "Kanji 14 30.43%",
            "Other 3 6.52%",
            "Total 46",
        ]

    def test_unique_report(self, sample_file, capsys):
        code, out, _ = _run([str(sample_file), "--unique"], capsys)
        assert code == 0
        assert out.splitlines()[-1] == "Total 35"

    def test_count_printed_before_unique(self, sample_file, capsys):
        _, out, _ = _run([str(sample_file), "-u", "-c"], capsys)
        totals = [line for line in out.splitlines() if line.startswith("Total")]
        assert totals == ["Total 46", "Total 35"]

    def test_exclude_affects_listing_and_total(self, sample_file, capsys):
        """
        Given: -e other kanji
        When: The count report is printed
        Then: Only Hiragana and Katakana are listed and the total is 29
        """
        _, out, _ = _run([str(sample_file), "-c", "-e", "other", "kanji"], capsys)
        assert out.splitlines() == [
            "Hiragana 24 82.76%",
            "Katakana 5 17.24%",
            "Total 29",
        ]

    def test_frequency_table(self, sample_file, capsys):
        _, out, _ = _run([str(sample_file), "-f", "katakana"], capsys)
        assert out.splitlines() == ["ラ 1", "ン 1", "ド 1", "セ 1", "ル 1"]

    def test_frequency_not_filtered_by_exclude(self, sample_file, capsys):
        _, out, _ = _run([str(sample_file), "-f", "other", "-e", "other"], capsys)
        assert out.splitlines() == ["。 1", "、 2"]

    def test_repeated_frequency_flags(self, sample_file, capsys):
        _, out, _ = _run([str(sample_file), "-f", "other", "-f", "katakana", "-f", "other"], capsys)
        lines = out.splitlines()
        assert lines[:2] == ["。 1", "、 2"]
        assert len(lines) == 7

    def test_category_names_case_insensitive(self, sample_file, capsys):
        code, out, _ = _run([str(sample_file), "-f", "Kanji"], capsys)
        assert code == 0
        assert out.splitlines()[-1] == "日 2"

    def test_no_report_flag_prints_nothing(self, sample_file, capsys):
        code, out, err = _run([str(sample_file)], capsys)
        assert code == 0
        assert out == ""
        assert err == ""

    def test_reads_stdin_when_no_file(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("あア\n漢\n"))
        code, out, _ = _run(["-c"], capsys)
        assert code == 0
        assert out.splitlines()[-1] == "Total 3"

    def test_empty_input_gives_zero_percentages(self, tmp_path, capsys):
        empty = tmp_path / "empty.txt"
        empty.write_text("", encoding="utf-8")
        _, out, _ = _run([str(empty), "-c"], capsys)
        assert out.splitlines()[0] == "Hiragana 0 0.00%"
        assert out.splitlines()[-1] == "Total 0"


class TestJsonOutput:
    """--json output."""

    def test_json_document(self, sample_file, capsys):
        code, out, _ = _run([str(sample_file), "--json", "-c", "-f", "katakana"], capsys)
        assert code == 0
        payload = json.loads(out)
        assert set(payload) == {"frequencies", "count"}
        assert payload["frequencies"]["Katakana"][0] == ["ラ", 1]
        assert payload["count"]["total"] == 46
        assert payload["count"]["categories"]["Hiragana"] == {"count": 24, "percentage": 52.17}

    def test_json_unique_with_exclusion(self, sample_file, capsys):
        _, out, _ = _run([str(sample_file), "--json", "-u", "-e", "other"], capsys)
        payload = json.loads(out)
        assert payload["unique"]["excluded"] == ["Other"]
        assert payload["unique"]["total"] == 33


class TestErrors:
    """Exit codes and messages on failure."""

    def test_missing_file(self, tmp_path, capsys):
        """
        Given: A file path that does not exist
        When: main() runs
        Then: Exit code is 1 and stderr explains the failure, stdout stays empty
        """
        code, out, err = _run([str(tmp_path / "nope.txt"), "-c"], capsys)
        assert code == 1
        assert out == ""
        assert err.startswith("Failed to read:")

    def test_invalid_encoding_in_file_aborts_without_report(self, invalid_utf8_file, capsys):
        code, out, err = _run([str(invalid_utf8_file), "-c"], capsys)
        assert code == 1
        assert out == ""
        assert "Failed to read:" in err

    def test_unknown_category(self, sample_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_file), "-f", "romaji"])
        assert exc_info.value.code == 2
        assert "invalid character kind 'romaji'" in capsys.readouterr().err

    def test_unknown_flag(self, sample_file):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_file), "--bogus"])
        assert exc_info.value.code == 2

    def test_unknown_encoding(self, sample_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(sample_file), "-c", "--encoding", "no-such-codec"])
        assert exc_info.value.code == 2
        assert "unknown encoding" in capsys.readouterr().err


class TestHelpAndVersion:
    """No-argument help and --version."""

    def test_no_arguments_shows_help(self, capsys):
        code, out, err = _run([], capsys)
        assert code == 2
        assert out == ""
        assert "usage: jpaz" in err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestVerbose:
    """-v logging goes to stderr, never stdout."""

    def test_verbose_logs_phases_to_stderr(self, sample_file, capsys):
        code, out, err = _run([str(sample_file), "-c", "-v"], capsys)
        assert code == 0
        assert out.splitlines()[-1] == "Total 46"
        assert "READ_INPUT" in err
        assert "REPORT" in err

    def test_extra_verbose_prints_timing_summary(self, sample_file, capsys):
        _, _, err = _run([str(sample_file), "-c", "-vv"], capsys)
        assert "TIMING SUMMARY" in err
