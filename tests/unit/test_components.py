from turf_arena.components import Capture, Player, Rendering, Spawn
from turf_arena.types import RenderKind


def test_capture_allowed_while_unowned_or_under_limit() -> None:
    owner = Player(id=0, color="red")
    assert Capture(recaptures=0).can_capture is True
    assert Capture(recaptures=0, owner=owner, count=1).can_capture is False
    assert Capture(recaptures=2, owner=owner, count=1).can_capture is True
    assert Capture(recaptures=2, owner=owner, count=2).can_capture is True
    assert Capture(recaptures=2, owner=owner, count=3).can_capture is False


def test_spawn_restriction() -> None:
    assert Spawn().allows(3) is True
    assert Spawn(restricted_to=1).allows(1) is True
    assert Spawn(restricted_to=1).allows(2) is False
    assert Spawn(restricted_to=1).allows(None) is True


def test_rendering_constructors() -> None:
    assert Rendering.color("red") == Rendering(kind=RenderKind.COLOR, value="red")
    image = Rendering.image("indicator_on")
    assert image.kind is RenderKind.IMAGE
    assert image.value is None
    assert image.asset_key == "indicator_on"
