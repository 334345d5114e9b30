import io

import pytest

from countysearch.cli import CountyApp, CountyData, load_data, main, trim


def _row(county, state, population):
    return ",".join([county, state] + ["x"] * 29 + [population])


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "counties.csv"
    lines = [
        "County,State,header",
        _row('"Alachua County"', "FL", "278468"),
        _row("Autauga County", "AL", "58805"),
        _row("Baker County", "FL", "28259"),
        _row("Baker County", "GA", "2876"),
        _row("", "TX", "1"),
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def _run(script, data_file):
    out = io.StringIO()
    app = CountyApp(io.StringIO(script), out, data_file)
    code = app.run()
    return code, out.getvalue(), app


def test_trim_whitespace_and_quotes():
    assert trim('  "Alachua County"  ') == "Alachua County"
    assert trim("\tplain\r\n") == "plain"
    assert trim('"') == '"'
    assert trim("") == ""


def test_load_data_reads_rows(data_file):
    rows = load_data(data_file)
    assert rows[0] == CountyData("Alachua County", "FL", "278468")
    assert len(rows) == 4
    assert all(row.county_name for row in rows)


def test_load_data_short_row_has_empty_population(tmp_path):
    path = tmp_path / "short.csv"
    path.write_text("h\nSome County,NY,5\n", encoding="utf-8")
    assert load_data(str(path)) == [CountyData("Some County", "NY", "")]


def test_load_data_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_data(str(tmp_path / "absent.csv"))


def test_exit_immediately(data_file):
    code, output, _ = _run("9\n", data_file)
    assert code == 0
    assert "Exiting..." in output


def test_requires_dataset(data_file):
    _, output, _ = _run("2\n9\n", data_file)
    assert "Dataset is empty. Please load a dataset first." in output


def test_invalid_choice(data_file):
    _, output, _ = _run("42\n9\n", data_file)
    assert "Invalid menu choice, please enter a valid number (1-9) from the menu." in output


def test_end_of_input_stops(data_file):
    code, output, _ = _run("1\n", data_file)
    assert code == 0
    assert "Successfully loaded 4 entries." in output


def test_missing_file_reports_error(tmp_path):
    missing = str(tmp_path / "nope.csv")
    _, output, app = _run("1\n9\n", missing)
    assert f"Error: Could not open file {missing}" in output
    assert app.dataset == []


def test_trie_exact_search(data_file):
    _, output, app = _run("1\n2\n6\nBaker County\ny\n9\n", data_file)
    assert "Found Entry(s): Baker County" in output
    assert "Matching Results: 2" in output
    assert "Baker County, FL, Population: 28259" in output
    assert "Baker County, GA, Population: 2876" in output
    assert app.trie.search_full("Autauga County") == {"AL": "58805"}


def test_trie_exact_search_missing(data_file):
    _, output, _ = _run("1\n2\n6\nNowhere\n9\n", data_file)
    assert "Could Not Find: Nowhere" in output
    assert "Exact Search Complete" in output


def test_trie_prefix_search(data_file):
    _, output, _ = _run("1\n2\n7\nA\ny\n9\n", data_file)
    assert "Matching Counties: 2" in output
    assert "Alachua County\n" in output
    assert "Autauga County\n" in output


def test_trie_insert_then_search(data_file):
    script = "1\n4\nNew County\nZZ 100\n6\nNew County\ny\n9\n"
    _, output, app = _run(script, data_file)
    assert app.trie.search_full("New County") == {"ZZ": "100"}
    assert "New County, ZZ, Population: 100" in output


def test_hidden_trie_status(data_file):
    _, before, _ = _run("10\n9\n", data_file)
    _, after, _ = _run("1\n2\n10\n9\n", data_file)
    assert "The countyTrie is currently empty." in before
    assert "The countyTrie contains data." in after


def test_hashmap_load_and_search(data_file):
    _, output, app = _run("1\n3\n8\nAlachua County\n8\nNowhere\n9\n", data_file)
    assert "HashMap Statistics:" in output
    assert "Found 'Alachua County'. State: 'FL'." in output
    assert "Did not find 'Nowhere'." in output
    assert len(app.hashmap) == 3


def test_hashmap_insert(data_file):
    _, _, app = _run("1\n5\nNew County\nZZ\n9\n", data_file)
    assert app.hashmap.search("New County") == "ZZ"


def test_main_with_argv(data_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n9\n"))
    assert main([data_file]) == 0
    assert "Successfully loaded 4 entries." in capsys.readouterr().out