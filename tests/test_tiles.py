import pytest

from cengaver.tiles import (
    GadgetType,
    TileManager,
    TileProperties,
    get_tile_manager,
    load_tile_properties,
    set_tile_manager,
)

TILES_INI = """\
[pref0]
id=30
bitmapFile=Resources/Enemies.bmp
bitmapXPos=2
bitmapWidth=16
bitmapHeight=32
bitmapCount=3
animation=true
solid=True
gadgetType=2
xMod=-3
healthMod=300

[pref1]
bitmapCount=1
"""


@pytest.fixture
def tiles_file(tmp_path):
    path = tmp_path / "tiles.ini"
    path.write_text(TILES_INI)
    return path


def test_default_table_entries(tmp_path):
    manager = TileManager(tmp_path / "absent.ini")
    tp = manager.get(12)
    assert tp.id == 12
    assert tp.bitmap_file == "Resources/BackgroundTiles.bmp"
    assert (tp.bitmap_width, tp.bitmap_height, tp.bitmap_count) == (16, 16, 1)
    assert tp.solid is False and tp.animation is False


def test_loaded_entry(tiles_file):
    manager = TileManager(tiles_file)
    tp = manager.get(30)
    assert tp.id == 30
    assert tp.bitmap_file == "Resources/Enemies.bmp"
    assert (tp.bitmap_x, tp.bitmap_width, tp.bitmap_height, tp.bitmap_count) == (2, 16, 32, 3)
    assert tp.animation is True and tp.solid is True
    assert tp.gadget_type is GadgetType.STAR
    assert tp.x_mod == -3
    assert tp.health_mod == 44


def test_id_defaults_to_section_index(tiles_file):
    table = load_tile_properties(tiles_file, [TileProperties(id=i) for i in range(256)])
    tp = table[1]
    assert tp.id == 1
    assert tp.layer == -1
    assert tp.bitmap_file == ""
    assert tp.bitmap_width == 0


def test_is_interesting_for_collision(tiles_file):
    manager = TileManager(tiles_file)
    assert manager.is_interesting_for_collision(30) is True
    assert manager.is_interesting_for_collision(0) is False
    assert manager.is_interesting_for_collision(5) is False
    assert manager.is_interesting_for_collision(TileProperties(id=4, y_mod=2)) is True
    assert manager.is_interesting_for_collision(TileProperties(id=0, solid=True)) is False


def test_out_of_range_id_raises(tmp_path):
    manager = TileManager(tmp_path / "absent.ini")
    with pytest.raises(IndexError):
        manager.get(256)


def test_shared_manager(tmp_path):
    custom = TileManager(tmp_path / "absent.ini")
    set_tile_manager(custom)
    try:
        assert get_tile_manager() is custom
    finally:
        set_tile_manager(None)
    first = get_tile_manager()
    assert get_tile_manager() is first
    set_tile_manager(None)