import pytest
from PIL import Image as PILImage

from raycaster.ray import Ray
from raycaster.texture import Texture, WallTextures, load_texture


def _texture(fill):
    return Texture(2, 2, [fill] * 4)


def test_texel_reads_row_major():
    tex = Texture(3, 2, [1, 2, 3, 4, 5, 6])
    assert tex.texel(0, 0) == 1
    assert tex.texel(2, 0) == 3
    assert tex.texel(0, 1) == 4
    assert tex.texel(2, 1) == 6


def test_texel_clamps_out_of_range():
    tex = Texture(3, 2, [1, 2, 3, 4, 5, 6])
    assert tex.texel(-5, -5) == tex.texel(0, 0)
    assert tex.texel(99, 99) == tex.texel(2, 1)
    assert tex.texel(99, 0) == tex.texel(2, 0)


def test_wrong_pixel_count_raises():
    with pytest.raises(ValueError):
        Texture(2, 2, [0, 0, 0])


def test_non_positive_size_raises():
    with pytest.raises(ValueError):
        Texture(0, 1, [])


@pytest.mark.parametrize(
    "vertical, right, down, expected",
    [
        (True, True, False, "west"),
        (True, False, True, "east"),
        (False, True, True, "north"),
        (False, False, False, "south"),
    ],
)
def test_select_picks_face(vertical, right, down, expected):
    walls = WallTextures(
        north=_texture(1), south=_texture(2), east=_texture(3), west=_texture(4)
    )
    ray = Ray(
        was_hit_vertical=vertical,
        is_facing_right=right,
        is_facing_left=not right,
        is_facing_down=down,
        is_facing_up=not down,
    )
    assert walls.select(ray) is getattr(walls, expected)


def test_load_texture_round_trip(tmp_path):
    path = tmp_path / "wall.png"
    img = PILImage.new("RGB", (3, 2))
    img.putpixel((0, 0), (0x12, 0x34, 0x56))
    img.putpixel((2, 1), (0xFF, 0x00, 0x80))
    img.save(path)
    tex = load_texture(path)
    assert (tex.width, tex.height) == (3, 2)
    assert tex.texel(0, 0) == 0x123456
    assert tex.texel(2, 1) == 0xFF0080
    assert tex.texel(1, 0) == 0


def test_load_missing_texture_raises(tmp_path):
    with pytest.raises(OSError):
        load_texture(tmp_path / "absent.png")