from sketchjam.config import DRUM_COLOR_DARK, DRUM_COLOR_LIGHT, GRID_COLOR_LIGHT
from sketchjam.logic.canvas_state import CanvasState
from sketchjam.logic.elements import DrumElement, PianoElement
from sketchjam.logic.history import HistoryManager


def make_state(limit=20):
    history = HistoryManager(limit=limit)
    return CanvasState(history=history), history


def test_add_then_undo_and_redo():
    state, history = make_state()
    piano = state.add_element(PianoElement(0, 0, 100, 100))
    assert history.can_undo()

    history.undo(state)
    assert state.elements == []
    assert state.selected is None

    history.redo(state)
    assert state.elements == [piano]


def test_restored_elements_are_fresh_copies():
    state, history = make_state()
    state.add_element(PianoElement(0, 0, 100, 100))
    entry = history.undo_stack[-1]
    history.undo(state)
    history.redo(state)
    assert state.elements[0] == entry.after[0]
    assert state.elements[0] is not entry.after[0]


def test_create_element_from_drag():
    state, _ = make_state()
    guitar = state.create_element("guitar", (25, 25), (40, 300))
    assert (guitar.x, guitar.y) == (25, 25)
    assert (guitar.width, guitar.height) == (15, 275)
    assert state.selected is guitar


def test_click_without_drag_uses_default_size():
    state, _ = make_state()
    piano = state.create_element("piano", (50, 50), (55, 55))
    assert (piano.width, piano.height) == (100, 100)


def test_unknown_mode_creates_nothing():
    state, history = make_state()
    assert state.create_element("tuba", (0, 0), (100, 100)) is None
    assert not history.can_undo()


def test_drag_records_a_single_move():
    state, history = make_state()
    state.add_element(PianoElement(0, 0, 100, 100))
    state.select_at(10, 10)

    state.begin_drag()
    for x, y in ((11, 12), (22, 24), (33, 47)):
        state.drag_selected_to(x, y)
    state.end_drag()

    assert (state.elements[0].x, state.elements[0].y) == (35, 45)
    assert history.get_stats()['undo_count'] == 2

    history.undo(state)
    assert (state.elements[0].x, state.elements[0].y) == (0, 0)


def test_drag_without_movement_is_not_recorded():
    state, history = make_state()
    state.add_element(PianoElement(0, 0, 100, 100))
    state.begin_drag()
    state.end_drag()
    assert history.get_stats()['undo_count'] == 1


def test_delete_and_undo_bring_the_element_back():
    state, history = make_state()
    piano = state.add_element(PianoElement(0, 0, 100, 100))
    assert state.delete_selected()
    assert state.elements == []
    history.undo(state)
    assert state.elements == [piano]


def test_duplicate_gets_a_new_id():
    state, _ = make_state()
    piano = state.add_element(PianoElement(0, 0, 100, 100))
    duplicate = state.duplicate_selected()
    assert len(state.elements) == 2
    assert duplicate.element_id != piano.element_id
    assert state.selected is duplicate


def test_opacity_change_at_limit_is_not_recorded():
    state, history = make_state()
    state.add_element(PianoElement(0, 0, 100, 100))
    state.change_opacity(0.2)  # already at 1.0
    assert history.get_stats()['undo_count'] == 1
    state.change_opacity(-0.2)
    assert state.selected.opacity == 0.8
    assert history.get_stats()['undo_count'] == 2


def test_rotate_is_undoable():
    state, history = make_state()
    state.add_element(PianoElement(0, 0, 100, 100))
    state.rotate_selected()
    assert state.elements[0].rotation == 90
    history.undo(state)
    assert state.elements[0].rotation == 0


def test_palette_color_skips_drums():
    state, history = make_state()
    state.add_element(DrumElement(0, 0, 50, 50))
    state.set_current_color((0, 255, 0))
    assert state.current_color == (0, 255, 0)
    assert state.elements[0].color == DRUM_COLOR_DARK
    assert history.get_stats()['undo_count'] == 1

    state.add_element(PianoElement(200, 0, 100, 100))
    state.set_current_color((0, 0, 255))
    assert state.elements[1].color == (0, 0, 255)
    assert history.get_stats()['undo_count'] == 3


def test_theme_recolors_drums_and_grid():
    state, history = make_state()
    state.add_element(DrumElement(0, 0, 50, 50))
    state.set_element_colors(False)
    assert state.elements[0].color == DRUM_COLOR_LIGHT
    assert state.grid_color == GRID_COLOR_LIGHT

    # The recorded snapshot still has the dark drum; redo follows the current theme
    history.undo(state)
    history.redo(state)
    assert state.elements[0].color == DRUM_COLOR_LIGHT


def test_background_gray_is_clamped():
    state, _ = make_state()
    state.set_background_color(300)
    assert state.background_gray == 255
    state.set_background_color(-4)
    assert state.background_gray == 0


def test_element_at_returns_topmost():
    state, _ = make_state()
    bottom = state.add_element(PianoElement(0, 0, 100, 100))
    top = state.add_element(PianoElement(50, 0, 100, 100))
    assert state.element_at(75, 50) is top
    assert state.element_at(25, 50) is bottom
    assert state.element_at(500, 500) is None


def test_history_capacity_through_canvas():
    state, history = make_state(limit=2)
    for i in range(3):
        state.add_element(PianoElement(i * 100, 0, 100, 100))
    history.undo(state)
    history.undo(state)
    assert history.undo(state) is None
    # The first add was evicted, so one piano stays
    assert len(state.elements) == 1


def test_nudge_snaps_and_is_undoable():
    state, history = make_state()
    state.add_element(PianoElement(0, 0, 100, 100))
    state.move_selected(5, 0)
    state.move_selected(0, -5)
    assert (state.elements[0].x, state.elements[0].y) == (5, -5)
    history.undo(state)
    assert (state.elements[0].x, state.elements[0].y) == (5, 0)


def labels(history):
    return [entry.label for entry in history.undo_stack]


def test_delete_during_drag_is_one_entry():
    state, history = make_state()
    state.add_element(PianoElement(0, 0, 100, 100))
    state.select_at(10, 10)
    state.begin_drag()
    state.delete_selected()
    state.end_drag()
    assert labels(history) == ["Add Piano", "Delete"]


def test_rotate_during_drag_keeps_move_and_rotate_separate():
    state, history = make_state()
    state.add_element(PianoElement(0, 0, 100, 100))
    state.begin_drag()
    state.drag_selected_to(20, 0)
    state.rotate_selected()
    state.drag_selected_to(40, 0)
    state.end_drag()
    assert labels(history) == ["Add Piano", "Move", "Rotate", "Move"]

    history.undo(state)
    assert (state.elements[0].x, state.elements[0].rotation) == (20, 90)


def test_opacity_steps_land_on_the_floor_exactly():
    state, history = make_state()
    state.add_element(PianoElement(0, 0, 100, 100))
    for _ in range(5):
        state.change_opacity(-0.2)
    assert state.selected.opacity == 0.2
    # Add plus four real steps; the fifth press changes nothing
    assert history.get_stats()['undo_count'] == 5


def test_configured_snap_size_drives_moves():
    history = HistoryManager()
    state = CanvasState(history=history, grid_size=50, snap_size=10)
    state.add_element(PianoElement(0, 0, 100, 100))
    state.begin_drag()
    state.drag_selected_to(14, 26)
    state.end_drag()
    assert (state.elements[0].x, state.elements[0].y) == (10, 30)


def make_row(state, count=3):
    return [state.add_element(PianoElement(i * 150, 0, 100, 100)) for i in range(count)]


def test_marquee_selects_by_center():
    state, _ = make_state()
    first, second, third = make_row(state)
    hits = state.select_in_rect((260, 120), (0, 0))
    assert hits == [first, second]
    assert state.selection == [first, second]
    assert state.selected is None


def test_marquee_with_one_hit_selects_it():
    state, _ = make_state()
    first, _, _ = make_row(state)
    state.select_in_rect((0, 0), (60, 60))
    assert state.selected is first
    assert state.selection == [first]


def test_group_delete_is_one_undo():
    state, history = make_state()
    make_row(state)
    state.select_in_rect((0, 0), (260, 120))
    state.delete_selected()
    assert len(state.elements) == 1
    assert state.selection == []
    history.undo(state)
    assert len(state.elements) == 3


def test_group_opacity_and_recolor_record_once():
    state, history = make_state()
    make_row(state)
    state.add_element(DrumElement(500, 0, 50, 50))
    state.select_in_rect((0, 0), (600, 120))
    before = history.get_stats()['undo_count']

    state.change_opacity(-0.2)
    assert [e.opacity for e in state.elements] == [0.8] * 4
    state.set_current_color((0, 0, 255))
    assert [e.color for e in state.elements[:3]] == [(0, 0, 255)] * 3
    assert state.elements[3].color == DRUM_COLOR_DARK
    assert history.get_stats()['undo_count'] == before + 2


def test_group_nudge_moves_every_element():
    state, history = make_state()
    make_row(state, 2)
    state.select_in_rect((0, 0), (400, 120))
    state.move_selected(5, 5)
    assert [(e.x, e.y) for e in state.elements] == [(5, 5), (155, 5)]
    history.undo(state)
    assert [(e.x, e.y) for e in state.elements] == [(0, 0), (150, 0)]


def test_click_and_undo_clear_the_group():
    state, history = make_state()
    first, _, _ = make_row(state)
    state.select_in_rect((0, 0), (400, 120))
    state.select_at(10, 10)
    assert state.selection == [first]

    state.select_in_rect((0, 0), (400, 120))
    history.undo(state)
    assert state.selection == []
