import pytest
from PIL import Image

from raycube.app import check_arg, main
from raycube.scene import SceneError

ELEMENTS_WITHOUT_EAST = "NO {n}\nSO {s}\nWE {w}\nF 1,2,3\nC 4,5,6\n"


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def _scene_text(tmp_path, grid):
    names = {key: str(tmp_path / f"{key}.xpm") for key in ("n", "s", "w", "e")}
    head = ELEMENTS_WITHOUT_EAST.format(**names) + f"EA {names['e']}\n"
    return head + "\n" + "\n".join(grid) + "\n", names


def test_check_arg_returns_path(tmp_path):
    scene = _write(tmp_path / "level.cub", "x")
    assert check_arg([str(scene)]) == scene


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_check_arg_counts_arguments(argv):
    with pytest.raises(SceneError, match="Incorrect number of arguments"):
        check_arg(argv)


def test_check_arg_rejects_extension(tmp_path):
    other = _write(tmp_path / "level.txt", "x")
    with pytest.raises(SceneError, match="a .cub is expected"):
        check_arg([str(other)])


def test_check_arg_missing_file(tmp_path):
    with pytest.raises(SceneError, match="Can't open file"):
        check_arg([str(tmp_path / "missing.cub")])


def test_check_arg_directory(tmp_path):
    folder = tmp_path / "folder.cub"
    folder.mkdir()
    with pytest.raises(SceneError, match="Can't read a directory"):
        check_arg([str(folder)])


def test_main_reports_bad_arguments(capsys):
    assert main([]) == 1
    err = capsys.readouterr().err.splitlines()
    assert err == ["Error", "Incorrect number of arguments"]


def test_main_reports_missing_texture(tmp_path, capsys):
    names = {key: str(tmp_path / f"{key}.xpm") for key in ("n", "s", "w")}
    scene = _write(tmp_path / "level.cub", ELEMENTS_WITHOUT_EAST.format(**names))
    assert main([str(scene)]) == 1
    assert capsys.readouterr().err.splitlines() == ["Error", "Missing texture"]


def test_main_reports_unreadable_texture(tmp_path, capsys):
    text, _ = _scene_text(tmp_path, ["111", "1N1", "111"])
    scene = _write(tmp_path / "level.cub", text)
    assert main([str(scene)]) == 1
    assert capsys.readouterr().err.splitlines() == ["Error", "Failed XPM to image"]


def test_main_reports_map_without_player(tmp_path, capsys):
    text, names = _scene_text(tmp_path, ["111", "101", "111"])
    for name in names.values():
        Image.new("RGB", (2, 2), (255, 0, 0)).save(name, format="PNG")
    scene = _write(tmp_path / "level.cub", text)
    assert main([str(scene)]) == 1
    assert capsys.readouterr().err.splitlines() == ["Error", "There is no player"]


def test_main_bonus_flag_is_not_an_argument(capsys):
    assert main(["--bonus"]) == 1
    assert capsys.readouterr().err.splitlines()[1] == "Incorrect number of arguments"