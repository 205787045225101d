import pytest

from deepdig.config import load_config
from deepdig.exceptions import ViewportOutOfBoundsError
from deepdig.world import GridWorld, Viewport


@pytest.fixture
def world(block_catalog):
    layout = [[(r + c) % 3 for c in range(6)] for r in range(5)]
    return GridWorld(layout, blocks=block_catalog)


def test_initial_window(world):
    view = Viewport(world, 2, 3)
    cells = view.cells()
    assert len(cells) == 2 and all(len(col) == 3 for col in cells)
    assert view.visible_ids() == {0, 6, 12, 1, 7, 13}


def test_scroll_reports_entered_left_and_kept(world):
    view = Viewport(world, 2, 2)
    delta = view.scroll(1, 0)

    assert (view.col, view.row) == (1, 0)
    assert delta.entered == {2, 8}
    assert delta.left == {0, 6}
    assert delta.kept == {1, 7}


def test_move_out_of_bounds_keeps_position(world):
    view = Viewport(world, 3, 3, col=1, row=1)
    with pytest.raises(ViewportOutOfBoundsError):
        view.move_to(4, 0)
    with pytest.raises(ViewportOutOfBoundsError):
        view.scroll(0, -2)
    assert (view.col, view.row) == (1, 1)


def test_initial_window_must_fit(world):
    with pytest.raises(ViewportOutOfBoundsError):
        Viewport(world, 7, 1)


def test_viewport_from_default_config():
    config = load_config()
    view = Viewport.from_config(GridWorld.from_config(config), config)
    assert (view.width, view.height) == (5, 8)
    assert len(view.visible_ids()) == 40
