import pytest

from sketchjam.config import DEFAULT_CONFIG
from sketchjam.logic.audio_sink import AudioSink
from sketchjam.logic.context import SketchContext
from sketchjam.logic.elements import PianoElement


def test_initial_level_reaches_the_audio_sink():
    sink = AudioSink()
    context = SketchContext(audio_sink=sink)
    assert context.settings.level == 6
    assert sink.eq.bass_gain == pytest.approx(1.045, abs=1e-3)
    assert context.canvas.background_gray == round(5 / 11 * 255)


def test_works_without_an_audio_sink():
    context = SketchContext()
    result = context.apply_level(99)
    assert result.level == 11


def test_from_config_reads_limits():
    config = {**DEFAULT_CONFIG, "history": {"limit": 3}}
    context = SketchContext.from_config(config)
    assert context.history.limit == 3
    assert context.canvas.width == DEFAULT_CONFIG["canvas"]["width"]


def test_undo_redo_shortcuts_go_through_history():
    context = SketchContext()
    assert context.undo() is None

    context.canvas.add_element(PianoElement(0, 0, 100, 100))
    assert context.undo() is not None
    assert context.canvas.elements == []
    assert context.redo() is not None
    assert len(context.canvas.elements) == 1


def test_record_after_undo_makes_redo_a_no_op():
    context = SketchContext()
    context.canvas.add_element(PianoElement(0, 0, 100, 100))
    context.undo()
    context.canvas.add_element(PianoElement(200, 0, 100, 100))
    assert context.redo() is None
    assert [e.x for e in context.canvas.elements] == [200]


def test_from_config_reads_grid_sizes():
    canvas_section = {**DEFAULT_CONFIG["canvas"], "grid_size": 50, "snap_size": 10}
    context = SketchContext.from_config({**DEFAULT_CONFIG, "canvas": canvas_section})
    assert context.canvas.grid_size == 50
    assert context.canvas.snap_size == 10
