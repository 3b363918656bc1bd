from sketchjam.logic.elements import (DrumElement, SnareDrumElement, PianoElement,
                                      GuitarElement, ELEMENT_TYPES)


def test_drum_snaps_to_nearest_tom():
    drum = DrumElement(0, 0, 80, 60)
    assert (drum.width, drum.height) == (75, 75)
    assert drum.mapped_value == "Mid Tom"
    assert DrumElement(0, 0, 10, 10).mapped_value == "High Tom"
    assert DrumElement(0, 0, 400, 10).mapped_value == "Floor Tom"


def test_snare_ties_go_to_smaller_size():
    assert SnareDrumElement(0, 0, 125, 125).width == 100
    snare = SnareDrumElement(0, 0, 140, 20)
    assert (snare.width, snare.height) == (150, 150)
    assert snare.mapped_value == "Middle Shot"


def test_piano_width_is_fixed_and_height_picks_octave():
    piano = PianoElement(0, 0, 30, 250)
    assert piano.width == 100
    assert piano.height == 300  # .5 rounds up
    assert piano.mapped_value == "Octave 3"
    assert PianoElement(0, 0, 100, 20).mapped_value == "Octave 5"
    assert PianoElement(0, 0, 100, 900).mapped_value == "Octave 1"


def test_guitar_width_and_height_snaps():
    guitar = GuitarElement(0, 0, 12, 110)
    assert (guitar.width, guitar.height) == (10, 100)
    assert guitar.mapped_value == "Octave 4, Duration 4"
    guitar.set_size(100, 1000)
    assert (guitar.width, guitar.height) == (25, 500)
    assert guitar.octave == 1


def test_opacity_is_clamped():
    piano = PianoElement(0, 0, 100, 100)
    piano.set_opacity(0.0)
    assert piano.opacity == 0.2
    piano.set_opacity(3.0)
    assert piano.opacity == 1.0


def test_rotation_cycles():
    guitar = GuitarElement(0, 0, 5, 100)
    for expected in (90, 180, 270, 0):
        guitar.rotate90()
        assert guitar.rotation == expected


def test_contains_accounts_for_rotation():
    piano = PianoElement(0, 0, 100, 100)
    assert piano.contains(50, 50)
    assert not piano.contains(100, 50)

    piano.rotate90()
    # Rotated about the top-left corner, the body now sits to the left
    assert piano.contains(-50, 50)
    assert not piano.contains(50, 50)


def test_drums_ignore_palette_colors():
    drum = DrumElement(0, 0, 50, 50, color=(0, 0, 0))
    drum.set_color((255, 0, 0))
    assert drum.color == (0, 0, 0)

    piano = PianoElement(0, 0, 100, 100)
    piano.set_color((0, 255, 0))
    assert piano.color == (0, 255, 0)


def test_copy_is_equal_but_independent():
    piano = PianoElement(10, 20, 100, 200, color=(1, 2, 3))
    clone = piano.copy()
    assert clone == piano
    assert clone is not piano

    clone.set_position(50, 50)
    assert piano.x == 10
    assert clone != piano


def test_element_registry():
    assert set(ELEMENT_TYPES) == {"drum", "snare", "piano", "guitar"}
