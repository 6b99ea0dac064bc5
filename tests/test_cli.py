"""Tests for the command-line wrapper, driven through main(argv)."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import csv
import json

import pytest

from html_samples import HTML_NO_TABLE, HTML_TWO_TABLES
from table_extract.cli import main


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.html"
    path.write_text(HTML_TWO_TABLES, encoding="utf-8")
    return path


class TestCli:

    def test_first_table_json(self, page, capsys):
        assert main(["--file", str(page)]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["headers"] == {"Name": 0, "Age": 1}
        assert out["rows"] == [["John", "20"]]

    def test_by_id(self, page, capsys):
        assert main(["--file", str(page), "--id", "second"]) == 0
        assert json.loads(capsys.readouterr().out)["headers"] == {"Name": 0, "Weight": 1}

    def test_by_headers(self, page, capsys):
        assert main(["--file", str(page), "--headers", "Weight", "Name"]) == 0
        assert json.loads(capsys.readouterr().out)["rows"] == [["John", "150"]]

    def test_all(self, page, capsys):
        assert main(["--file", str(page), "--all"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert [t["headers"] for t in out] == [{"Name": 0, "Age": 1}, {"Name": 0, "Weight": 1}]

    def test_not_found(self, tmp_path, capsys):
        path = tmp_path / "empty.html"
        path.write_text(HTML_NO_TABLE, encoding="utf-8")
        assert main(["--file", str(path)]) == 1
        assert "No matching table" in capsys.readouterr().err

    def test_csv_out(self, page, tmp_path, capsys):
        out_path = tmp_path / "out" / "second.csv"
        assert main(["--file", str(page), "--id", "second", "--csv-out", str(out_path)]) == 0
        meta = json.loads(capsys.readouterr().out)
        assert meta == {"ok": True, "rows": 1, "file": str(out_path)}
        with out_path.open(encoding="utf-8", newline="") as f:
            assert list(csv.reader(f)) == [["Name", "Weight"], ["John", "150"]]

    def test_all_with_csv_out_is_rejected(self, page, tmp_path):
        assert main(["--file", str(page), "--all", "--csv-out", str(tmp_path / "x.csv")]) == 2

    def test_id_and_headers_are_exclusive(self, page):
        with pytest.raises(SystemExit):
            main(["--file", str(page), "--id", "first", "--headers", "Name"])
