from cengaver.saves import (
    DEFAULT_LOWTIME,
    FIELD_SIZE,
    SaveData,
    default_save_path,
    load_game,
    save_game,
)


def test_missing_file_gives_defaults(tmp_path):
    data = load_game(tmp_path / "none.sav")
    assert data == SaveData(level=0, health=10, time=0, highscore=0, lowtime=99999 * 40)


def test_round_trip(tmp_path):
    path = tmp_path / "dir" / "Save.sav"
    save_game(path, 3, 1200, 80, 17, 4500)
    assert load_game(path) == SaveData(level=3, health=80, time=1200, highscore=17, lowtime=4500)


def test_file_layout(tmp_path):
    path = tmp_path / "Save.sav"
    save_game(path, 3, 1200, 80, 17, 4500)
    raw = path.read_bytes()
    assert raw[:2] == bytes([3, 80])
    assert raw[2:2 + FIELD_SIZE].rstrip(b"\0") == b"1200"
    assert len(raw) == 2 + 3 * FIELD_SIZE


def test_non_positive_scores_are_left_blank(tmp_path):
    path = tmp_path / "Save.sav"
    save_game(path, 1, 0, 100, -1, -1)
    data = load_game(path)
    assert data.highscore == 0
    assert data.lowtime == DEFAULT_LOWTIME
    assert (data.level, data.health) == (1, 100)


def test_lowtime_kept_when_highscore_blank(tmp_path):
    path = tmp_path / "Save.sav"
    save_game(path, 0, 0, 100, 0, 900)
    data = load_game(path)
    assert data.highscore == 0
    assert data.lowtime == 900


def test_default_save_path_name():
    path = default_save_path()
    assert path.name == "Save.sav"
    assert path.parent.name == "Cengaver The Prism Operation"