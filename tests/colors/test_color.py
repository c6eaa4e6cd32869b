import pytest
from pixelgrid.colors import Color
from samples import samples_hsv_rgb, samples_rgb_hsv

def test_default_alpha_is_opaque():
    color = Color(10, 20, 30)
    assert color.value == (10, 20, 30, 255)
    assert color.alpha == 255

def test_constructor_stores_values_verbatim():
    color = Color(300, -5, 1.5, 999)
    assert (color.r, color.g, color.b, color.a) == (300, -5, 1.5, 999)

def test_equality_is_by_value():
    assert Color(1, 2, 3, 4) == Color(1, 2, 3, 4)
    assert Color(1, 2, 3) == Color(1, 2, 3, 255)
    assert Color(1, 2, 3, 4) != Color(1, 2, 3, 5)
    assert Color(1, 2, 3, 4) != (1, 2, 3, 4)

def test_colors_are_mutable_and_unhashable():
    color = Color(0, 0, 0)
    color.g = 200
    assert color.value == (0, 200, 0, 255)
    with pytest.raises(TypeError):
        hash(color)

def test_no_extra_attributes():
    with pytest.raises(AttributeError):
        Color(0, 0, 0).x = 1

def test_copy_is_independent():
    original = Color(1, 2, 3, 4)
    clone = original.copy()
    assert clone == original
    assert clone is not original
    clone.r = 100
    assert original.r == 1

def test_with_alpha():
    color = Color(10, 20, 30)
    translucent = color.with_alpha(128)
    assert translucent.value == (10, 20, 30, 128)
    assert color.alpha == 255

def test_iteration_and_repr():
    color = Color(1, 2, 3, 4)
    r, g, b, a = color
    assert (r, g, b, a) == (1, 2, 3, 4)
    assert repr(color) == "Color(1, 2, 3, 4)"

def test_from_hsv_pure_red():
    assert Color.from_hsv(0, 1, 255) == Color(255, 0, 0, 255)

def test_from_hsv_samples():
    for (h, s, v), expected in samples_hsv_rgb.items():
        color = Color.from_hsv(h, s, v)
        assert color.alpha == 255
        for channel, exp in zip(color.value[:3], expected):
            assert isinstance(channel, int)
            assert abs(channel - exp) <= 0.5

def test_from_hsv_zero_saturation_returns_full_color():
    color = Color.from_hsv(200, 0, 90)
    assert isinstance(color, Color)
    assert color == Color(90, 90, 90, 255)

def test_to_hsv():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h, s, v = Color(*rgb).to_hsv()
        assert abs(h - h_exp) < 1e-9
        assert abs(s - s_exp) < 1e-9
        assert abs(v - v_exp) < 1e-9

def test_to_hsv_ignores_alpha():
    assert Color(255, 0, 0, 0).to_hsv() == Color(255, 0, 0, 255).to_hsv()
