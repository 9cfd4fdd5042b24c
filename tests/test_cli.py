import json

import pytest

from helpers import font_face

from fontranges import cli


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    # Keep the repository's fontranges.toml out of the way
    monkeypatch.chdir(tmp_path)


def write_css(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_count_tokens(capsys):
    assert cli.main(["--count", "U+0000-00FF", "--count", "U+4??"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == ["U+0000-00FF\t256", "U+4??\t256"]


def test_count_invalid_token(capsys):
    assert cli.main(["--count", "U+0200-0100", "--count", "U+41"]) == 1

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["U+41\t1"]
    assert "U+0200-0100" in captured.err


def test_text_output(tmp_path, capsys):
    path = write_css(
        tmp_path, "fonts.css",
        font_face("ComplexFont", "U+0000-00FF", "U+0131", "U+0152-0153") + font_face("ComplexFont", "U+4??"),
    )

    assert cli.main([path, "--chunks"]) == 0

    out = capsys.readouterr().out
    assert out.startswith(f"{path}:\n")
    assert "ComplexFont" in out
    assert "515 codepoints" in out
    assert "1. 259" in out
    assert "2. 256" in out


def test_json_output(tmp_path, capsys):
    a = write_css(tmp_path, "a.css", font_face("A", "U+0041-005A"))
    b = write_css(tmp_path, "b.css", "body { color: red; }")

    assert cli.main(["--json", a, b]) == 0

    assert json.loads(capsys.readouterr().out) == {a: {"A": [26]}, b: {}}


def test_failed_input_does_not_stop_the_others(tmp_path, capsys):
    bad = write_css(tmp_path, "bad.css", font_face("Bad", "U+0200-0100"))
    good = write_css(tmp_path, "good.css", font_face("Good", "U+00??"))

    assert cli.main(["--json", bad, str(tmp_path / "missing.css"), good]) == 1

    captured = capsys.readouterr()
    assert json.loads(captured.out) == {good: {"Good": [256]}}
    assert "bad.css" in captured.err
    assert "missing.css" in captured.err


def test_undecodable_file_does_not_stop_the_others(tmp_path, capsys):
    bad = tmp_path / "bad.css"
    bad.write_bytes(b"@font-face { font-family: '\xff'; }")
    good = write_css(tmp_path, "good.css", font_face("G", "U+0041"))

    assert cli.main(["--json", str(bad), good]) == 1

    captured = capsys.readouterr()
    assert json.loads(captured.out) == {good: {"G": [1]}}
    assert "bad.css" in captured.err


def test_invalid_config_is_reported(tmp_path, capsys):
    css = write_css(tmp_path, "a.css", font_face("A", "U+0041"))
    (tmp_path / "fontranges.toml").write_text("[fetch]\nretries = 0\n", encoding="utf-8")

    assert cli.main([css]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "fetch.retries" in captured.err


def test_unparseable_config_is_reported(tmp_path, capsys):
    config = tmp_path / "custom.toml"
    config.write_text("[fetch\n", encoding="utf-8")

    assert cli.main(["-c", str(config), "-g", "Roboto"]) == 1
    assert "custom.toml" in capsys.readouterr().err


def test_google_families_from_config(tmp_path, monkeypatch, capsys):
    (tmp_path / "fontranges.toml").write_text('[google]\nfamilies = ["Roboto"]\n', encoding="utf-8")
    fetched = []

    def fake_fetch(family, config):
        fetched.append(family)
        return font_face(family, "U+0000-00FF")

    monkeypatch.setattr(cli, "fetch_google_font_css", fake_fetch)

    assert cli.main(["--json"]) == 0

    assert fetched == ["Roboto"]
    assert json.loads(capsys.readouterr().out) == {"Roboto": {"Roboto": [256]}}


def test_google_option_overrides_config(tmp_path, monkeypatch, capsys):
    (tmp_path / "fontranges.toml").write_text('[google]\nfamilies = ["Roboto"]\n', encoding="utf-8")
    fetched = []

    def fake_fetch(family, config):
        fetched.append(family)
        return font_face(family)

    monkeypatch.setattr(cli, "fetch_google_font_css", fake_fetch)

    assert cli.main(["-g", "Lexend"]) == 0
    assert fetched == ["Lexend"]


def test_no_inputs_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2
