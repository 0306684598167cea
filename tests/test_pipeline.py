"""End-to-end tests for the pipeline and the org-chart command."""

import csv

import pytest
from docx import Document

from conftest import HEADER, make_row
from org_chart.cli import main, parse_args
from org_chart.config import ChartConfig
from org_chart.pipeline import build_chart, load_records, run, validate
from org_chart.records import MissingColumnsError, OrgChartError
from org_chart.source import read_table


def write_csv(path, rows):
    with open(path, "w", newline="", encoding="utf-8") as f:
        csv.writer(f).writerows(rows)
    return str(path)


@pytest.fixture
def source(tmp_path, sample_rows):
    return write_csv(tmp_path / "employees.csv", sample_rows)


class TestReadTable:
    def test_csv_rows_include_header(self, source, sample_rows):
        rows = read_table(source)
        assert rows[0] == HEADER
        assert len(rows) == len(sample_rows)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        assert read_table(str(path)) == []

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "nowhere.csv")
        with pytest.raises(OrgChartError, match="Cannot read .*nowhere.csv"):
            read_table(path)

    def test_unsupported_extension(self, tmp_path):
        with pytest.raises(OrgChartError, match="Unsupported source file type"):
            read_table(str(tmp_path / "employees.txt"))


class TestPipeline:
    def test_run(self, source, tmp_path):
        out = str(tmp_path / "chart.docx")
        result = run(ChartConfig(source=source, destination=out))
        assert result.path == out
        assert result.stats.total == 4
        assert "Total Employees: 4" in [p.text for p in Document(out).paragraphs]

    def test_run_for_one_team(self, source, tmp_path):
        out = str(tmp_path / "team.docx")
        result = run(ChartConfig(source=source, destination=out, root_id="b1"))
        assert result.stats.total == 2

    def test_unknown_root(self, source):
        with pytest.raises(OrgChartError, match="'nope'"):
            build_chart(load_records(ChartConfig(source=source)), "nope")

    def test_validate_writes_nothing(self, source, tmp_path, capsys):
        assert validate(ChartConfig(source=source)) == 4
        assert "Validation passed: 4" in capsys.readouterr().out
        assert sorted(p.name for p in tmp_path.iterdir()) == ["employees.csv"]

    def test_fatal_error_writes_nothing(self, tmp_path):
        src = write_csv(tmp_path / "bad.csv", [["Name", "User ID"], ["Ann", "a1"]])
        out = tmp_path / "chart.docx"
        with pytest.raises(MissingColumnsError):
            run(ChartConfig(source=src, destination=str(out)))
        assert not out.exists()


class TestCli:
    def test_parse_args_defaults(self):
        args = parse_args(["run", "employees.xlsx"])
        assert args.command == "run"
        assert args.output == "org_chart.docx"
        assert args.sheet == 0
        assert args.root_id is None

    def test_sheet_by_name(self):
        assert parse_args(["validate", "x.xlsx", "--sheet", "Org Chart"]).sheet == "Org Chart"

    def test_validate(self, source, capsys):
        assert main(["validate", source]) == 0
        assert "[INFO] Validation passed: 4" in capsys.readouterr().out

    def test_run_then_new(self, source, tmp_path):
        out = str(tmp_path / "chart.docx")
        assert main(["run", source, "-o", out]) == 0
        assert main(["run", source, "-o", out]) == 0
        assert len(list(tmp_path.glob("chart*.docx"))) == 1

        assert main(["new", source, "-o", out]) == 0
        assert len(list(tmp_path.glob("chart*.docx"))) == 2

    def test_export(self, source, tmp_path):
        out = tmp_path / "org.json"
        assert main(["export", source, "-o", str(out), "--root", "a1"]) == 0
        assert '"name": "Ann"' in out.read_text()
        assert '"name": "Cid"' not in out.read_text()

    def test_diagram(self, source, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "org_chart.cli.render_diagram",
            lambda forest, output, **kw: calls.append((forest, output, kw)),
        )
        assert main(["diagram", source, "--rankdir", "LR", "--clusters", "-o", "chart"]) == 0
        forest, output, kw = calls[0]
        assert [n.record.name for n in forest] == ["Ann", "Cid"]
        assert output == "chart"
        assert kw == {"fmt": "png", "rankdir": "LR", "clusters": True}

    def test_missing_columns_exit_code(self, tmp_path, capsys):
        src = write_csv(tmp_path / "bad.csv", [HEADER[:2], make_row("Ann", "a1")[:2]])
        assert main(["run", src, "-o", str(tmp_path / "x.docx")]) == 1
        err = capsys.readouterr().err
        assert err.startswith("[ERROR] Source table is missing required column(s): Job Title")

    def test_missing_source_exit_code(self, tmp_path, capsys):
        assert main(["run", str(tmp_path / "nowhere.xlsx"), "-o", str(tmp_path / "x.docx")]) == 1
        assert capsys.readouterr().err.startswith("[ERROR] Cannot read")
        assert not (tmp_path / "x.docx").exists()

    def test_empty_source_exit_code(self, tmp_path, capsys):
        src = write_csv(tmp_path / "only_header.csv", [HEADER])
        assert main(["validate", src]) == 1
        assert "no data rows" in capsys.readouterr().err
