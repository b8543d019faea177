import random

from mazecrawl.maze import generate
from mazecrawl.maze.connectivity import count_connectors, flood_open, is_spanning_tree, odd_cells, open_cells

from maze_test_utils import bfs_reachable, room_cells


def test_multiple_seed_connectivity():
    for n in (5, 9, 21, 41):
        for s in (101, 202, 303, 404, 505):
            g = generate(n, random.Random(s))
            reach = bfs_reachable(g, (1, 1))
            missing = [c for c in room_cells(n) if c not in reach]
            assert not missing, f"size={n} seed={s} unreachable rooms: {missing[:5]}"
            opened = {(x, z) for z in range(n) for x in range(n) if not g[z][x]}
            assert opened == reach, f"size={n} seed={s} has isolated open cells"


def test_carve_forms_spanning_tree():
    for n in (5, 7, 21, 31):
        for s in range(10):
            g = generate(n, random.Random(s))
            rooms = room_cells(n)
            opened = [(x, z) for z in range(n) for x in range(n) if not g[z][x]]
            corridors = [c for c in opened if c not in set(rooms)]
            assert len(corridors) == len(rooms) - 1, f"size={n} seed={s}"
            assert is_spanning_tree(g)


def test_connectivity_helpers_agree_with_oracle():
    g = generate(15, random.Random(7))
    assert flood_open(g, (1, 1)) == bfs_reachable(g, (1, 1))
    assert odd_cells(15) == room_cells(15)
    assert count_connectors(g) == len(odd_cells(15)) - 1
    assert len(open_cells(g)) == 2 * len(odd_cells(15)) - 1


def test_flood_open_from_solid_cell_is_empty():
    g = generate(9, random.Random(1))
    assert flood_open(g, (0, 0)) == set()
    assert flood_open(g, (99, 99)) == set()


def test_is_spanning_tree_rejects_cycle():
    g = [list(row) for row in generate(9, random.Random(3))]
    # Open every corridor between the first two rows of rooms to force a loop
    for x in range(1, 8):
        g[1][x] = False
        g[3][x] = False
    for x in range(1, 8, 2):
        g[2][x] = False
    assert not is_spanning_tree(g)


def test_size_five_visits_all_four_rooms():
    for s in range(20):
        g = generate(5, random.Random(s))
        for x, z in [(1, 1), (1, 3), (3, 1), (3, 3)]:
            assert g[z][x] is False
        assert sum(1 for row in g for solid in row if not solid) == 7
