from patternlab.state import (
    CameraState,
    CameraSwitcher,
    FreeCamera,
    TargetCamera,
    run,
)


def test_default_state_is_target():
    switcher = CameraSwitcher()
    assert switcher.state is CameraState.TARGET
    assert isinstance(switcher.camera, TargetCamera)


def test_switch_toggles_back_and_forth():
    switcher = CameraSwitcher()
    switcher.switch()
    assert switcher.state is CameraState.FREE
    assert isinstance(switcher.camera, FreeCamera)
    switcher.switch()
    assert switcher.state is CameraState.TARGET


def test_explicit_initial_state():
    switcher = CameraSwitcher(CameraState.FREE)
    assert switcher.state is CameraState.FREE
    switcher.switch()
    assert switcher.state is CameraState.TARGET


def test_camera_is_kept_across_switches():
    switcher = CameraSwitcher()
    first = switcher.camera
    switcher.switch()
    switcher.switch()
    assert switcher.camera is first


def test_camera_messages(capsys):
    TargetCamera().move()
    FreeCamera().look()
    assert capsys.readouterr().out == (
        "TargetCamera is moves\nFreeCamera is looking\n"
    )


def test_run_output(capsys):
    run()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Camera State: Target"
    assert lines[3] == "Camera State: Free"
    assert lines[4] == "FreeCamera is moves"
    assert lines[6] == "Camera State: Target"
    assert len(lines) == 9