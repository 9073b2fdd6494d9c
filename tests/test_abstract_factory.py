from patternlab.abstract_factory import (
    DesertLevelFactory,
    ForestLevelFactory,
    Habitat,
    Level,
    LevelType,
    Skeleton,
    Spider,
    UndergroundPrisonLevelFactory,
    Zombie,
    run,
)


def _count(monsters, kind):
    return sum(1 for m in monsters if type(m) is kind)


def test_monster_messages(capsys):
    zombie = Zombie(0, Habitat.FOREST)
    assert capsys.readouterr().out == "0) Zombie Forest \n"
    assert zombie.destroyed_message() == "Forest Zombie destroyed"


def test_forest_roster():
    factory = ForestLevelFactory()
    factory.create_monsters()
    assert _count(factory.monsters, Zombie) == 3
    assert _count(factory.monsters, Spider) == 4
    assert _count(factory.monsters, Skeleton) == 0
    assert all(m.habitat is Habitat.FOREST for m in factory.monsters)


def test_desert_and_prison_rosters():
    desert = DesertLevelFactory()
    desert.create_monsters()
    assert _count(desert.monsters, Skeleton) == 2
    assert _count(desert.monsters, Spider) == 1
    prison = UndergroundPrisonLevelFactory()
    prison.create_monsters()
    assert _count(prison.monsters, Zombie) == 4
    assert _count(prison.monsters, Skeleton) == 3
    assert _count(prison.monsters, Spider) == 1


def test_counters_restart_per_kind():
    factory = ForestLevelFactory()
    factory.create_monsters()
    zombies = [m.counter for m in factory.monsters if isinstance(m, Zombie)]
    assert zombies == [0, 1, 2]


def test_release_destroys_last_kind_first(capsys):
    factory = ForestLevelFactory()
    factory.create_monsters()
    capsys.readouterr()
    factory.release()
    lines = capsys.readouterr().out.splitlines()
    assert lines.index("Forest Spider destroyed") < lines.index("Forest Zombie destroyed")
    assert factory.monsters == []


def test_level_lifecycle(capsys):
    with Level(LevelType.UNDERGROUND_PRISON) as level:
        level.generate()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Level Underground Prison"
    assert "Created Underground Prison monsters" in lines
    assert lines.index("Level generated") < lines.index("Level destroyed")
    level.close()
    assert capsys.readouterr().out == ""


def test_run_visits_every_level(capsys):
    run()
    out = capsys.readouterr().out
    assert out.count("Level generated") == 3
    assert out.index("Level Forest") < out.index("Level Desert") < out.index("Level Underground Prison")