from sketchjam.logic.palette import (Palette, build_color_matrix, cell_at, note_for_column,
                                     note_for_color, blend_with_white, NOTE_COLORS)


def test_top_row_is_the_pure_note_colors():
    matrix = build_color_matrix()
    assert len(matrix) == 4
    assert tuple(matrix[0]) == NOTE_COLORS


def test_lower_rows_blend_toward_white():
    assert blend_with_white((255, 0, 0), 0.4) == (255, 153, 153)
    assert blend_with_white((0, 0, 0), 0.0) == (255, 255, 255)


def test_cell_at():
    assert cell_at(25, 25) == (0, 0)
    assert cell_at(324, 124) == (3, 11)
    assert cell_at(24, 30) is None
    assert cell_at(325, 30) is None
    assert cell_at(30, 125) is None


def test_note_names():
    assert note_for_column(0) == "C"
    assert note_for_column(1) == "C#"
    assert note_for_column(12) == ""


def test_select_at_returns_color():
    palette = Palette()
    assert palette.select_at(60, 30) == NOTE_COLORS[1]
    assert palette.selected == (0, 1)
    assert palette.select_at(0, 0) is None
    assert palette.selected == (0, 1)
    palette.clear_selection()
    assert palette.selected is None


def test_note_for_color_covers_every_tint_row():
    matrix = build_color_matrix()
    assert note_for_color(NOTE_COLORS[7]) == "G"
    assert note_for_color(matrix[3][9]) == "A"
    assert note_for_color((1, 2, 3)) == ""
