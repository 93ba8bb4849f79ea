from aocsolutions.ocr import screen_to_string


def test_small_screen():
    assert screen_to_string([[True, False], [False, True]]) == "#.\n.#"


def test_no_trailing_newline():
    result = screen_to_string([[True], [True], [False]])
    assert not result.endswith("\n")
    assert len(result.splitlines()) == 3


def test_round_trip():
    screen = [
        [True, True, False, False, True],
        [False, True, False, True, False],
        [True, False, False, False, True],
    ]
    rendered = screen_to_string(screen)
    decoded = [[c == "#" for c in line] for line in rendered.split("\n")]
    assert decoded == screen


def test_empty_screen():
    assert screen_to_string([]) == ""