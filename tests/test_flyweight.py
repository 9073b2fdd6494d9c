import math

from patternlab.flyweight import (
    XYZ,
    ObjectFactory,
    Position,
    Rotation,
    Scale,
    SceneObject,
    Transform,
    run,
)


def test_factory_shares_objects():
    factory = ObjectFactory()
    first = factory.get("abc")
    assert factory.get("abc") is first
    assert first.name == "abc"
    assert len(factory) == 1


def test_factory_counts_distinct_names():
    factory = ObjectFactory()
    for name in ["a", "b", "a", "c", "b"]:
        factory.get(name)
    assert len(factory) == 3
    assert "c" in factory


def test_close_reports_in_name_order_and_empties(capsys):
    factory = ObjectFactory()
    for name in ["b", "a"]:
        factory.get(name)
    factory.close()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        'Object "a" deleted from ObjectFactory',
        'Object "b" deleted from ObjectFactory',
    ]
    assert len(factory) == 0


def test_context_manager_closes(capsys):
    with ObjectFactory() as factory:
        factory.get("x")
    assert len(factory) == 0
    assert 'Object "x"' in capsys.readouterr().out


def test_objects_order_by_name():
    assert SceneObject("a") < SceneObject("b")
    assert sorted([SceneObject("c"), SceneObject("a")])[0].name == "a"


def test_xyz_and_scale_text():
    assert str(XYZ(1, 2, 3)) == "(1; 2; 3)"
    assert Scale() == Scale(1.0, 1.0, 1.0)
    assert Position() == Position(0.0, 0.0, 0.0)


def test_transform_text_lists_parts():
    transform = Transform(Position(1, 2, 3), Rotation(), Scale())
    lines = str(transform).splitlines()
    assert lines[0] == f"Position: {transform.position}"
    assert lines[1] == f"Rotation: {transform.rotation}"
    assert lines[2] == f"Scale: {transform.scale}"


def test_transformation_prints_name(capsys):
    SceneObject("cube").transformation(Transform())
    out = capsys.readouterr().out
    assert out.startswith("Object name: cube\n")
    assert str(Transform()) in out


def test_run_counts_permutations_and_waits_twice(capsys):
    calls = []
    run(lambda: calls.append(1))
    lines = capsys.readouterr().out.splitlines()
    assert int(lines[0]) == math.factorial(9)
    assert len(calls) == 2
    assert lines[1] == 'Object "abcdefghi" deleted from ObjectFactory'
    assert len(lines) == math.factorial(9) + 1