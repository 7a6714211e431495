"""Tests for utils/output.py: JSON/CSV/table output routing."""
import json

from letterboxd.models.common import Genre
from letterboxd.models.films import FilmSummary
from letterboxd.utils.output import OutputFormat, _cell, print_csv, print_json, print_output, to_rows


# ── print_json ───────────────────────────────────────────────────────

def test_print_json_list(capsys):
    print_json([{"id": "1"}, {"id": "2"}])
    assert len(json.loads(capsys.readouterr().out)) == 2


def test_print_json_dict(capsys):
    print_json({"key": "value"})
    assert json.loads(capsys.readouterr().out) == {"key": "value"}


def test_print_json_empty(capsys):
    print_json([])
    assert json.loads(capsys.readouterr().out) == []


# ── print_csv ────────────────────────────────────────────────────────

def test_print_csv_basic(capsys):
    print_csv([{"name": "a", "val": "1"}, {"name": "b", "val": "2"}])
    lines = [l.strip() for l in capsys.readouterr().out.strip().splitlines()]
    assert lines[0] == "name,val"
    assert len(lines) == 3


def test_print_csv_selected_columns(capsys):
    print_csv([{"name": "a", "val": "1", "extra": "x"}], columns=["name", "val"])
    assert "extra" not in capsys.readouterr().out


def test_print_csv_empty(capsys):
    print_csv([])
    assert capsys.readouterr().out == ""


def test_print_csv_dict_input(capsys):
    """Single dict should be wrapped as list."""
    print_csv({"name": "a", "val": "1"})
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2  # header + 1 row


def test_print_csv_flattens_nested(capsys):
    print_csv([{"name": "Heat", "genres": [{"id": "g1", "name": "Crime"}, {"id": "g2", "name": "Drama"}]}])
    assert '"Crime, Drama"' in capsys.readouterr().out


# ── helpers ──────────────────────────────────────────────────────────

def test_cell_values():
    assert _cell(None) == ""
    assert _cell(3) == "3"
    assert _cell({"id": "x"}) == "x"
    assert _cell(["a", {"name": "b"}]) == "a, b"


def test_to_rows_uses_aliases():
    rows = to_rows(FilmSummary(id="2bbs", name="Heat", release_year=1995))
    assert rows == [{"id": "2bbs", "name": "Heat", "releaseYear": 1995, "directors": [], "relationships": []}]


def test_to_rows_sequence():
    assert to_rows([Genre(id="g1", name="Crime"), Genre(id="g2", name="Drama")])[1]["name"] == "Drama"


# ── print_output routing ────────────────────────────────────────────

def test_output_routes_to_json(capsys):
    print_output([{"x": 1}], fmt=OutputFormat.JSON)
    assert json.loads(capsys.readouterr().out) == [{"x": 1}]


def test_output_routes_to_csv(capsys):
    print_output([{"x": 1}], fmt=OutputFormat.CSV)
    assert capsys.readouterr().out.splitlines()[0] == "x"


def test_table_goes_to_stderr(capsys):
    print_output([{"x": 1}], fmt=OutputFormat.TABLE, title="T")
    assert capsys.readouterr().out == ""
