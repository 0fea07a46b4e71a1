import csv
import io
import json
import os

from randompass.charset import SPECIAL_CHARACTERS
from randompass.cli import main


def test_generate_single(capsys):
    assert main(["generate", "--length", "12"]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out) == 12


def test_generate_mapping_table(capsys):
    assert main(["generate", "-c", "3", "-l", "8", "--exclude-specials"]) == 0
    out = capsys.readouterr().out
    for i in range(1, 4):
        assert f"Password {i}" in out


def test_generate_json(capsys):
    assert main(["generate", "--count", "5", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert list(data) == [f"Password {i}" for i in range(1, 6)]
    assert all(len(v) == 16 for v in data.values())


def test_generate_exportable_csv(capsys):
    assert main(["generate", "--count", "3", "--length", "10", "--exportable"]) == 0
    rows = list(csv.DictReader(io.StringIO(capsys.readouterr().out)))
    assert [r["PasswordNumber"] for r in rows] == ["1", "2", "3"]
    assert all(len(r["PasswordValue"]) == 10 for r in rows)


def test_generate_writes_output_file(tmp_path, capsys):
    path = tmp_path / "out" / "passwords.csv"
    assert main(["generate", "-c", "2", "--exportable", "-o", str(path)]) == 0
    assert capsys.readouterr().out == ""
    rows = list(csv.DictReader(io.StringIO(path.read_text(encoding="utf-8"))))
    assert len(rows) == 2


def test_all_classes_excluded_fails(capsys):
    code = main([
        "generate", "--count", "3",
        "--exclude-uppercase", "--exclude-lowercase", "--exclude-numbers", "--exclude-specials",
    ])
    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""
    assert "No character type selected" in captured.err


def test_short_length_fails(capsys):
    assert main(["generate", "--length", "5"]) == 2
    assert capsys.readouterr().out == ""


def test_zero_count_fails(capsys):
    assert main(["generate", "--count", "0"]) == 2


def test_unsupported_specials_warn_but_generate(capsys, caplog):
    code = main([
        "generate", "--length", "6",
        "--exclude-uppercase", "--exclude-lowercase",
        "--specials", "ab!",
    ])
    assert code == 0
    pw = capsys.readouterr().out.strip()
    assert len(pw) == 6
    assert not any(c in SPECIAL_CHARACTERS and c != "!" for c in pw)
    messages = [r.getMessage() for r in caplog.records if r.levelname == "WARNING"]
    assert messages == [
        "Unsupported special character included: 'a' (This will not be included)",
        "Unsupported special character included: 'b' (This will not be included)",
    ]


def test_config_defaults_apply(capsys, isolated_appdata):
    assert main(["config", "set", "length", "20"]) == 0
    assert os.path.exists(os.path.join(str(isolated_appdata), "RandomPass", "config.json"))
    capsys.readouterr()
    assert main(["generate"]) == 0
    assert len(capsys.readouterr().out.strip()) == 20
    # explicit flag wins over the saved default
    assert main(["generate", "-l", "9"]) == 0
    assert len(capsys.readouterr().out.strip()) == 9


def test_config_set_rejects_bad_value(capsys):
    assert main(["config", "set", "length", "3"]) == 2
    assert "length must be >= 6" in capsys.readouterr().err


def test_config_show(capsys):
    assert main(["config", "show"]) == 0
    out = capsys.readouterr().out
    assert "length" in out
    assert "16" in out


def test_bad_saved_length_uses_default(capsys, isolated_appdata):
    cfg_dir = isolated_appdata / "RandomPass"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.json").write_text('{"length": "20"}', encoding="utf-8")
    assert main(["generate"]) == 0
    assert len(capsys.readouterr().out.strip()) == 16
