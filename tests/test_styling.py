from halfblock.styling import LOWER_HALF_BLOCK, RESET, paint, plain, strip_styles


def test_paint_sets_background_then_foreground():
    result = paint(LOWER_HALF_BLOCK, background=(255, 0, 0), foreground=(0, 0, 255))
    assert result == "\033[48;2;255;0;0m\033[38;2;0;0;255m▄\033[0m"


def test_plain_resets_styling():
    assert plain(" ") == RESET + " "


def test_strip_styles_leaves_visible_characters():
    text = paint("▄", (1, 2, 3), (4, 5, 6)) + plain(" ") + "\n"
    assert strip_styles(text) == "▄ \n"
