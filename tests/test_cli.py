from savewatch.cli import main


def test_runs_given_iterations(tmp_path):
    save = tmp_path / "saves"
    save.mkdir()
    dirs = tmp_path / "dirs.txt"
    assert main(["--save-path", str(save), "--dirs-file", str(dirs), "--iterations", "2"]) == 0
    assert dirs.exists()


def test_missing_save_path(tmp_path, capsys):
    code = main(["--save-path", str(tmp_path / "nope"), "--dirs-file", str(tmp_path / "d.txt"), "--iterations", "1"])
    assert code == 1
    assert "cannot watch" in capsys.readouterr().err