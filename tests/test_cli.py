import io

import pytest

from dsdrills.cli import ALGORITHMS, main


def test_display_from_arguments(capsys):
    assert main(["display", "4", "65", "24"]) == 0
    assert capsys.readouterr().out.strip() == "The array elements are : 4 65 24"


def test_sort_default_bubble(capsys):
    assert main(["sort", "5", "3", "8", "1"]) == 0
    assert capsys.readouterr().out.strip() == "Sorted array: 1 3 5 8"


@pytest.mark.parametrize("algorithm", sorted(ALGORITHMS))
def test_sort_every_algorithm(capsys, algorithm):
    values = ["42", "7", "99", "0", "15", "15"]
    assert main(["sort", "--algorithm", algorithm, *values]) == 0
    out = capsys.readouterr().out.strip()
    expected = " ".join(str(v) for v in sorted(int(v) for v in values))
    assert out == f"Sorted array: {expected}"


def test_sort_negative_numbers(capsys):
    assert main(["sort", "-a", "quick", "3", "-2", "0"]) == 0
    assert capsys.readouterr().out.strip() == "Sorted array: -2 0 3"


def test_display_reads_counted_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n10 20 30 40\n"))
    assert main(["display"]) == 0
    assert capsys.readouterr().out.strip() == "The array elements are : 10 20 30"


def test_sort_reads_counted_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 9 2 7 1"))
    assert main(["sort", "-a", "merge"]) == 0
    assert capsys.readouterr().out.strip() == "Sorted array: 1 2 7 9"


def test_stdin_too_few_elements(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 1 2"))
    with pytest.raises(SystemExit) as info:
        main(["sort"])
    assert info.value.code == 2


def test_stdin_not_integer(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 a b"))
    with pytest.raises(SystemExit) as info:
        main(["display"])
    assert info.value.code == 2


def test_unknown_algorithm():
    with pytest.raises(SystemExit) as info:
        main(["sort", "-a", "bogo", "1", "2"])
    assert info.value.code == 2


def test_bucket_out_of_range_reports_error(capsys):
    assert main(["sort", "-a", "bucket", "5", "100"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "dsdrills:" in captured.err


def test_missing_command():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2