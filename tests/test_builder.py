import pytest

from patternlab.builder import (
    HouseBuilder,
    HouseForeman,
    HouseType,
    OneRoomHouse,
    OneRoomHouseBuilder,
    OneRoomSpaceHouse,
    OneRoomSpaceHouseBuilder,
    run,
)


def test_one_room_house_full_plan(capsys):
    HouseForeman(OneRoomHouseBuilder()).build_house(HouseType.ONE_ROOM_HOUSE)
    assert capsys.readouterr().out.splitlines() == [
        "One-room house was demolished.",
        "Walls built for one-room house.",
        "Windows built for one-room house.",
        "Doors built for one-room house.",
        "Roof built for one-room house.",
    ]


def test_house_without_windows_and_doors(capsys):
    HouseForeman(OneRoomHouseBuilder()).build_house(
        HouseType.ONE_ROOM_HOUSE_WITHOUT_WINDOWS_AND_DOORS
    )
    assert capsys.readouterr().out.splitlines() == [
        "One-room house was demolished.",
        "Walls built for one-room house.",
        "Roof built for one-room house.",
    ]


def test_space_builder_has_no_roof_step(capsys):
    HouseForeman(OneRoomSpaceHouseBuilder()).build_house(HouseType.ONE_ROOM_HOUSE)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert not any("Roof" in line for line in lines)


def test_change_builder_switches_target(capsys):
    foreman = HouseForeman(OneRoomHouseBuilder())
    space = OneRoomSpaceHouseBuilder()
    foreman.change_builder(space)
    assert foreman.builder is space
    foreman.build_house(HouseType.ONE_ROOM_SPACE_HOUSE)
    out = capsys.readouterr().out
    assert "one-room space house" in out
    assert "Walls built for one-room house." not in out


def test_get_returns_same_house(capsys):
    builder = OneRoomHouseBuilder()
    first = builder.get()
    assert first is builder.get()
    first.about()
    OneRoomSpaceHouseBuilder().get().about()
    assert capsys.readouterr().out.splitlines() == [
        "I'm One-Room House",
        "I'm One-Room Space House",
    ]


def test_about_messages(capsys):
    OneRoomHouse().about()
    OneRoomSpaceHouse().about()
    assert capsys.readouterr().out.splitlines() == [
        "I'm One-Room House",
        "I'm One-Room Space House",
    ]


def test_house_builder_is_abstract():
    with pytest.raises(TypeError):
        HouseBuilder()


def test_run_ends_with_space_house(capsys):
    run()
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("=================") == 2
    assert lines[-1] == "I'm One-Room Space House"