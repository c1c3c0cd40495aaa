import yaml

from sudokusolver.io.cli import main


def _write(path, rows):
    path.write_text("grid:\n" + "".join(f'  - "{row}"\n' for row in rows), encoding="utf-8")
    return path


def test_list_samples(capsys):
    assert main(["--list-samples"]) == 0
    assert capsys.readouterr().out.split() == ["extreme", "telegraph", "very-easy"]


def test_solves_file_and_prints_solutions(tmp_path, capsys, solved_rows):
    rows = solved_rows
    rows[0] = "0" + rows[0][1:]
    path = _write(tmp_path / "one.yaml", rows)
    assert main([str(path), "--check"]) == 0
    out = capsys.readouterr().out
    assert "Time elapsed (Run time): " in out
    assert "Number of solutions: 1" in out
    assert "|5 3 4|6 7 8|9 1 2|" in out


def test_count_only_and_output(samples_dir, tmp_path, capsys):
    target = tmp_path / "solutions.yaml"
    assert main([str(samples_dir / "mini.yaml"), "--count-only", "--output", str(target)]) == 0
    out = capsys.readouterr().out
    assert "Number of solutions: 288" in out
    assert "+" not in out
    data = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert data["count"] == 288
    assert data["solutions"][0] == ["1234", "3412", "2143", "4321"]


def test_full_grid_is_reported(tmp_path, capsys, solved_rows):
    path = _write(tmp_path / "full.yaml", solved_rows)
    assert main([str(path)]) == 2
    assert "no empty cell" in capsys.readouterr().err


def test_unknown_sample(capsys):
    assert main(["--sample", "nope"]) == 2
    assert "unknown sample puzzle 'nope'" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.yaml")]) == 2
    assert "error:" in capsys.readouterr().err


def test_file_and_sample_together(samples_dir, capsys):
    assert main([str(samples_dir / "mini.yaml"), "--sample", "telegraph"]) == 2
    assert "not both" in capsys.readouterr().err


def test_non_ascii_digit_is_reported(tmp_path, capsys):
    path = _write(tmp_path / "super.yaml", ["²000", "0000", "0000", "0000"])
    assert main([str(path)]) == 2
    assert "unexpected character" in capsys.readouterr().err


def test_undecodable_file_is_reported(tmp_path, capsys):
    path = tmp_path / "latin.yaml"
    path.write_bytes(b'grid:\n  - "\xff\xfe00"\n')
    assert main([str(path)]) == 2
    assert "error:" in capsys.readouterr().err


def test_unwritable_output_is_reported(samples_dir, tmp_path, capsys):
    target = tmp_path / "missing" / "solutions.yaml"
    args = [str(samples_dir / "mini.yaml"), "--count-only", "--output", str(target)]
    assert main(args) == 2
    assert "error:" in capsys.readouterr().err
    assert not target.exists()
