import pytest

from practicas.history import History, HistoryError


@pytest.fixture
def history():
    h = History()
    for line in ("ls\n", "pid\n", "date\n"):
        h.append(line)
    return h


def test_len_and_iteration_keep_order(history):
    assert len(history) == 3
    assert list(history) == ["ls\n", "pid\n", "date\n"]


def test_get_by_integer(history):
    assert history.get(1) == "ls\n"
    assert history.get(3) == "date\n"


def test_get_by_text_matches_integer(history):
    for position in range(1, len(history) + 1):
        assert history.get(str(position)) == history.get(position)


def test_get_text_with_trailing_garbage(history):
    assert history.get("2abc") == history.get(2)


def test_get_beyond_end_raises(history):
    with pytest.raises(HistoryError, match="Not found"):
        history.get(4)


@pytest.mark.parametrize("position", [0, -1, "abc", "", "-3"])
def test_get_invalid_position_raises(history, position):
    with pytest.raises(HistoryError, match="Argument not recognized"):
        history.get(position)


def test_get_on_empty_history_raises():
    with pytest.raises(HistoryError, match="Lista vacia"):
        History().get(1)


def test_clear_empties(history):
    history.clear()
    assert len(history) == 0
    assert list(history) == []


def test_format_all_empty():
    assert History().format_all() == "History empty\n"


def test_format_all_numbers_lines(history):
    text = history.format_all()
    assert text.splitlines() == ["COMANDO 1: ls", "COMANDO 2: pid", "COMANDO 3: date"]


def test_format_first_empty():
    assert History().format_first(2) == "Lista vacia. No hay nada que imprimir\n"


def test_format_first_limits_count(history):
    text = history.format_first(2)
    assert "COMANDO 1: ls" in text
    assert "COMANDO 2: pid" in text
    assert "COMANDO 3" not in text


def test_format_first_larger_than_history_shows_all(history):
    text = history.format_first(10)
    for number in range(1, len(history) + 1):
        assert f"COMANDO {number}:" in text
    assert "COMANDO 4" not in text


def test_format_first_zero_is_blank(history):
    assert history.format_first(0) == ""