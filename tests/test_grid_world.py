import pytest

from deepdig.config import load_config
from deepdig.exceptions import CatalogError, GridIndexError, ViewportOutOfBoundsError
from deepdig.world import BlockKind, GridWorld, Passability
from deepdig.world.blocks import BlockCatalog, BlockDefinition

LAYOUT = [
    [1, 0, 1],
    [0, 0, 0],
    [1, 1, 0],
]


def test_construction_assigns_row_major_ids(block_catalog):
    world = GridWorld(LAYOUT, blocks=block_catalog)
    assert (world.width, world.height) == (3, 3)
    assert len(world) == 9

    ids = [[cell.id for cell in row] for row in world.rows()]
    assert ids == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]

    assert world.cell(0, 0).block_stack == (1,)
    assert world.cell(0, 0).passability is Passability.SOLID
    assert world.cell(0, 1).block_stack == ()
    assert world.cell(0, 1).passability is Passability.AIR
    assert world.to_codes() == LAYOUT


def test_query_is_column_major(block_catalog):
    world = GridWorld(LAYOUT, blocks=block_catalog)
    window = world.query(0, 0, 2, 2)

    pattern = [[cell.passability for cell in column] for column in window]
    assert pattern == [
        [Passability.SOLID, Passability.AIR],
        [Passability.AIR, Passability.AIR],
    ]


def test_query_ids_match_layout_positions(block_catalog):
    layout = [[(r * 5 + c) % 4 for c in range(5)] for r in range(4)]
    world = GridWorld(layout, blocks=block_catalog)

    for origin_col, origin_row, w, h in [(0, 0, 5, 4), (1, 2, 3, 2), (4, 3, 1, 1), (2, 1, 0, 3)]:
        window = world.query(origin_col, origin_row, w, h)
        assert len(window) == w
        for i, column in enumerate(window):
            assert len(column) == h
            for j, cell in enumerate(column):
                row, col = origin_row + j, origin_col + i
                assert cell.id == row * 5 + col
                assert cell is world.cell(row, col)


def test_repeated_queries_return_the_same_cells(block_catalog):
    world = GridWorld(LAYOUT, blocks=block_catalog)
    first = world.query(1, 1, 2, 2)
    second = world.query(0, 0, 3, 3)
    assert first[0][0] is second[1][1]
    assert first[1][1].id == second[2][2].id == 8


@pytest.mark.parametrize(
    "args",
    [
        (2, 0, 2, 1),  # overruns width
        (0, 2, 1, 2),  # overruns height
        (-1, 0, 1, 1),
        (0, -1, 1, 1),
        (0, 0, 4, 1),
    ],
)
def test_query_out_of_bounds_raises(block_catalog, args):
    world = GridWorld(LAYOUT, blocks=block_catalog)
    with pytest.raises(ViewportOutOfBoundsError):
        world.query(*args)


def test_query_negative_size_is_rejected(block_catalog):
    world = GridWorld(LAYOUT, blocks=block_catalog)
    with pytest.raises(ValueError):
        world.query(0, 0, -1, 1)


def test_set_block_stack_keeps_identity(block_catalog):
    world = GridWorld(LAYOUT, blocks=block_catalog)
    cell = world.cell(1, 1)

    world.set_block_stack(1, 1, [BlockKind.STONE, BlockKind.LADDER])
    assert world.cell(1, 1) is cell
    assert cell.id == 4
    assert cell.block_stack == (2, 4)
    assert cell.top == 4
    assert cell.passability is Passability.PLATFORM
    assert cell.is_open

    # digging everything out leaves open air
    world.set_block_stack(1, 1, [])
    assert cell.passability is Passability.AIR
    assert cell.top is None


def test_set_block_stack_rejects_bad_input(block_catalog):
    world = GridWorld(LAYOUT, blocks=block_catalog)
    with pytest.raises(GridIndexError):
        world.set_block_stack(3, 0, [1])
    with pytest.raises(CatalogError):
        world.set_block_stack(0, 0, [99, 1])
    # failed update leaves the cell unchanged
    assert world.cell(0, 0).block_stack == (1,)


def test_layout_validation(block_catalog):
    with pytest.raises(ValueError):
        GridWorld([], blocks=block_catalog)
    with pytest.raises(ValueError):
        GridWorld([[1, 0], [1]], blocks=block_catalog)
    with pytest.raises(CatalogError):
        GridWorld([[7]], blocks=block_catalog)
    with pytest.raises(GridIndexError):
        GridWorld(LAYOUT, blocks=block_catalog).cell(-1, 0)


def test_world_from_default_config():
    config = load_config()
    world = GridWorld.from_config(config)
    assert (world.width, world.height) == (20, 30)
    assert world.cell(0, 0).passability is Passability.AIR
    assert world.cell(3, 9).passability is Passability.PLATFORM
    assert world.cell(29, 19).passability is Passability.SOLID
    assert world.cell(29, 19).id == 599


def test_construction_passability_follows_the_catalog():
    blocks = BlockCatalog([BlockDefinition(1, "Scaffold", Passability.PLATFORM)])
    world = GridWorld([[1, 0]], blocks=blocks)
    assert world.cell(0, 0).passability is Passability.PLATFORM
    assert world.cell(0, 1).passability is Passability.AIR
