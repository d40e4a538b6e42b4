import time

import pytest

from dungeonweave.dungeon import DungeonConfig, LevelGenerator

# Simple performance guardrail. Not a strict micro-benchmark; aims to catch large regressions.
# Adjust thresholds if CI hardware differs significantly.


@pytest.mark.performance
@pytest.mark.parametrize("preset", ["medium", "large"])
def test_generation_time_per_preset(preset):
    seeds = [10101, 20202, 30303]
    max_seconds_per = 3.0  # generous threshold; a failed run still walks all attempts
    timings = []
    for s in seeds:
        cfg = DungeonConfig.preset(preset, seed=s, use_random_seed=False)
        start = time.perf_counter()
        LevelGenerator(cfg).generate_level()
        elapsed = time.perf_counter() - start
        timings.append(elapsed)
        assert elapsed < max_seconds_per, f"Seed {s} took {elapsed:.3f}s (> {max_seconds_per}s)"
    avg = sum(timings) / len(timings)
    assert avg < max_seconds_per * 0.85, f"Average generation {avg:.3f}s too high"
