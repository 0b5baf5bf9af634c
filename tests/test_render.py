import io

from termwordle.patterns import LetterResult
from termwordle.render import Renderer, color_tile, plain_tile


def test_plain_tiles():
    assert plain_tile("a", LetterResult.CORRECT) == "[a]"
    assert plain_tile("b", LetterResult.PRESENT) == "(b)"
    assert plain_tile("c", LetterResult.ABSENT) == "c"


def test_color_tile_uses_green_background():
    tile = color_tile("a", LetterResult.CORRECT)
    assert "\033[42m" in tile
    assert tile.endswith("a\033[0m")


def test_debug_silent_by_default():
    stream = io.StringIO()
    Renderer(color=False, stream=stream).debug("The word is: crane")
    assert stream.getvalue() == ""


def test_debug_enabled():
    stream = io.StringIO()
    Renderer(color=False, debug=True, stream=stream).debug("The word is: crane")
    assert stream.getvalue() == "[debug] The word is: crane\n"


def test_clear_input_line_only_with_color():
    stream = io.StringIO()
    Renderer(color=False, stream=stream).clear_input_line()
    assert stream.getvalue() == ""
    Renderer(color=True, stream=stream).clear_input_line()
    assert stream.getvalue() == "\033[1A\033[J"


def test_hint_line():
    stream = io.StringIO()
    Renderer(color=False, stream=stream).hint(1.5, 1)
    assert stream.getvalue() == "  1.50 bits of information, 1 word still possible\n"
