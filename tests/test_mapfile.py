import pytest

from solong.mapfile import (
    TILE_SIZE,
    GameMap,
    MapError,
    check_map_name,
    flood_fill,
    load_map,
    parse_map,
    validate_map,
)

VALID = "1111111\n1P0C0E1\n1111111\n"


def test_parse_map_dimensions():
    game_map = parse_map(VALID)
    assert game_map.rows == 3
    assert game_map.cols == 7
    assert game_map.width == game_map.cols * TILE_SIZE
    assert game_map.height == game_map.rows * TILE_SIZE


def test_parse_map_drops_blank_lines():
    game_map = parse_map("111\n\n\n111\n")
    assert game_map.layout == [list("111"), list("111")]


def test_parse_map_empty_raises():
    with pytest.raises(MapError):
        parse_map("\n\n")


def test_str_round_trip():
    assert str(parse_map(VALID)) == VALID.rstrip("\n")


def test_find_and_count():
    game_map = parse_map("1111\n1PC1\n1CE1\n1111")
    assert game_map.find("P") == (1, 1)
    assert game_map.find("E") == (2, 2)
    assert game_map.find("X") is None
    assert game_map.count("C") == 2


def test_copy_is_independent():
    game_map = parse_map(VALID)
    duplicate = game_map.copy()
    duplicate.layout[1][1] = "0"
    assert game_map.layout[1][1] == "P"
    assert duplicate.layout[1][1] == "0"


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    assert load_map(path) == parse_map(VALID)


def test_load_map_missing_file_raises(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "absent.ber")


def test_check_map_name_accepts_ber(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "level.ber").write_text(VALID)
    assert check_map_name("level.ber") == "level.ber"


def test_check_map_name_compares_only_suffix_prefix(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "level.berx").write_text(VALID)
    assert check_map_name("level.berx") == "level.berx"


@pytest.mark.parametrize("name", ["level.txt", "a.b.ber", ".ber", "nodot"])
def test_check_map_name_rejects_bad_names(tmp_path, monkeypatch, name):
    monkeypatch.chdir(tmp_path)
    (tmp_path / name).write_text(VALID)
    with pytest.raises(MapError, match="map name"):
        check_map_name(name)


def test_check_map_name_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MapError, match="Invalid map file"):
        check_map_name("missing.ber")


def test_flood_fill_marks_reachable_cells_only():
    grid = [list(row) for row in ["11111", "1P011", "11111", "1C0E1", "11111"]]
    flood_fill(grid, 1, 1)
    assert grid == [list(row) for row in ["11111", "1FF11", "11111", "1C0E1", "11111"]]


def test_flood_fill_passes_through_items():
    grid = [list(row) for row in ["11111", "1PCE1", "11111"]]
    flood_fill(grid, 1, 1)
    assert grid[1][1:4] == ["F", "F", "F"]
    assert all(cell == "1" for cell in grid[0])


def test_flood_fill_outside_does_nothing():
    grid = [list("101")]
    flood_fill(grid, 5, 0)
    assert grid == [list("101")]


def test_validate_map_leaves_map_unchanged():
    game_map = parse_map("111111\n1P0X01\n1C00E1\n111111")
    before = [list(row) for row in game_map.layout]
    validate_map(game_map)
    assert game_map.layout == before


@pytest.mark.parametrize(
    "text",
    [
        "11111\n1P0E1\n11111",
        "1111111\n1PPC0E1\n1111111",
        "1111111\n1P0CEE1\n1111111",
        "1111111\n1PZC0E1\n1111111",
        "11111111\n1PXXC0E1\n11111111",
        "1111111\n1P0C0E1\n11111",
        "1111111\n0P0C0E1\n1111111",
        "1111101\n1P0C0E1\n1111111",
        "1111111\n1P01CE1\n1111111",
        "1111111\n1P0C1E1\n1111111",
        "1111111\n1P0C0E1\r\n1111111",
    ],
)
def test_validate_map_rejects_invalid(text):
    with pytest.raises(MapError):
        validate_map(parse_map(text))


def test_validate_empty_layout_raises():
    with pytest.raises(MapError):
        validate_map(GameMap())