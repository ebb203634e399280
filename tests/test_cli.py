import io

from guitarstock.cli import main


def test_output_sections(capsys):
    assert main(["--size", "4", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("Electric guitar, \n") >= 6
    assert "The cheapest instrument is: \n" in out
    assert "The most expensive instrument is: \n" in out
    assert "Example of an instrunent in offer: \n" in out
    assert "The average price of an instrument is: " in out


def test_instrument_count(capsys):
    main(["--size", "5", "--seed", "2"])
    out = capsys.readouterr().out
    # five listed plus cheapest and most expensive, offer example may be a guitar too
    assert out.count("Electric guitar, \n") in (7, 8)


def test_seed_is_deterministic(capsys):
    main(["--size", "3", "--seed", "9"])
    first = capsys.readouterr().out
    main(["--size", "3", "--seed", "9"])
    assert capsys.readouterr().out == first


def test_size_from_prompt(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Input size of musical instruments: ")
    assert "The average price of an instrument is: " in out


def test_invalid_size_from_prompt(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "invalid size" in capsys.readouterr().err


def test_zero_size_rejected(capsys):
    assert main(["--size", "0"]) == 1
    assert "at least 1" in capsys.readouterr().err