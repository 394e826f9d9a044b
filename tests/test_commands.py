import pytest

from practicas.commands import command_names, help_text


def test_command_count_and_order():
    names = command_names()
    assert len(names) == 21
    assert names[0] == "authors"
    assert names[-1] == "deltree"


def test_names_are_unique():
    names = command_names()
    assert len(set(names)) == len(names)


def test_date_help():
    assert help_text("date") == "Prints the current date in the format DD/MM/YYYY"


def test_exit_aliases_share_help():
    assert help_text("quit") == help_text("exit") == help_text("bye")


def test_every_command_has_help():
    for name in command_names():
        assert help_text(name).strip()


def test_listing_contains_every_name_in_order():
    listing = help_text(None)
    assert listing.endswith("\n")
    assert listing.split() == list(command_names())


def test_unknown_command_raises():
    with pytest.raises(KeyError, match="Comando no encontrado"):
        help_text("nosuchcommand")