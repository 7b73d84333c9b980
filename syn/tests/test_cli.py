from pathlib import Path

import pytest

from syn.cli.main import cli_entry_point


def _run(argv: list[str]) -> int | str | None:
    with pytest.raises(SystemExit) as exc_info:
        cli_entry_point(prog="syn", argv=argv)
    return exc_info.value.code


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["--version"]) == 0
    assert "Syn" in capsys.readouterr().out


def test_cli_requires_input(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run([]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_cli_requires_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run([str(tmp_path)]) == 1
    assert "--out" in capsys.readouterr().err


def test_cli_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run([str(tmp_path / "missing.syn"), "--out", str(tmp_path / "out.php")]) == 1
    assert "[input-path-not-found-error]" in capsys.readouterr().err


def test_cli_process_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    macros = tmp_path / "macros.syn"
    macros.write_text(
        "$(macro) { unless ($(layer() as condition)) { $(layer() as body) } } >> "
        "{ if (!($(condition))) { $(body) } }\n",
        encoding="utf-8",
    )
    source = tmp_path / "index.syn.php"
    source.write_text('<?php\nunless ($x === 1) { echo "x"; }\n', encoding="utf-8")
    output = tmp_path / "index.php"

    assert _run([str(source), "-o", str(output), "-f", str(macros), "-v"]) == 0

    assert output.read_text(encoding="utf-8") == '<?php\nif (!($x === 1)) { echo "x"; }\n'
    out = capsys.readouterr().out
    assert "Converged" in out
    assert "Processed 1 file(s) successfully" in out


def test_cli_config_and_max_iterations(tmp_path: Path) -> None:
    (tmp_path / "macros").mkdir()
    (tmp_path / "macros" / "loop.syn").write_text("$(macro) { X } >> { X Y }\n", encoding="utf-8")
    config = tmp_path / "syn.toml"
    config.write_text('macro_directories = ["macros"]\nmax_iterations = 2\n', encoding="utf-8")
    source = tmp_path / "a.syn"
    source.write_text("X", encoding="utf-8")

    assert _run([str(source), "-o", str(tmp_path / "a.php"), "-c", str(config)]) == 0
    assert (tmp_path / "a.php").read_text(encoding="utf-8") == "X Y Y"

    assert _run([str(source), "-o", str(tmp_path / "b.php"), "-c", str(config), "--max-iterations", "1"]) == 0
    assert (tmp_path / "b.php").read_text(encoding="utf-8") == "X Y"


@pytest.mark.parametrize("value", ["0", "-1", "many"])
def test_cli_rejects_invalid_max_iterations(tmp_path: Path, capsys: pytest.CaptureFixture[str], value: str) -> None:
    source = tmp_path / "a.syn"
    source.write_text("X", encoding="utf-8")

    assert _run([str(source), "-o", str(tmp_path / "a.php"), "--max-iterations", value]) == 2
    assert "--max-iterations" in capsys.readouterr().err
    assert not (tmp_path / "a.php").exists()
