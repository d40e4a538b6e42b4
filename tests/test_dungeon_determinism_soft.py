from dungeonweave.dungeon import generate
from dungeon_test_utils import compact_config


def test_deterministic_core_metrics():
    cfg = compact_config(seed=314159)
    runs = [generate(cfg) for _ in range(3)]
    rooms_counts = {d.metrics["rooms"] for d in runs}
    corridor_counts = {d.metrics["tiles_corridor"] for d in runs}
    wall_counts = {d.metrics["tiles_wall"] for d in runs}
    assert len(rooms_counts) == 1, f"Rooms count nondeterministic: {rooms_counts}"
    assert len(corridor_counts) == 1, f"Corridor count nondeterministic: {corridor_counts}"
    assert len(wall_counts) == 1, f"Wall count nondeterministic: {wall_counts}"


def test_different_seeds_differ():
    a = generate(compact_config(seed=1))
    b = generate(compact_config(seed=2))
    assert a.to_ascii() != b.to_ascii()
