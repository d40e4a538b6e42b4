#!/usr/bin/env python3
"""Dungeon structural diagnostics for specific seeds.

Usage:
  python scripts/diagnose_seeds.py 292372 730727
  python scripts/diagnose_seeds.py --preset large --structured 1 2 3

If no seeds are provided as CLI args, a default list is used.
Exits with non-zero status if structural issues are detected.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from dungeonweave.dungeon import DungeonConfig, GenerationExhausted, generate  # noqa: E402 import after path fix
from dungeonweave.dungeon.debug_checks import summarize  # noqa: E402 import after path fix

DEFAULT_SEEDS = [292372, 730727]


def run_for_seed(seed: int, preset: str, organic: bool) -> dict:
    cfg = DungeonConfig.preset(preset, seed=seed, use_random_seed=False, use_organic_generation=organic)
    try:
        layout = generate(cfg)
    except GenerationExhausted as exc:
        return {"seed": seed, "issues": {"generation_exhausted": exc.attempts}, "ok": False}
    issues = summarize(layout)
    if organic:
        # blended rooms grow after placement, so padding is not guaranteed
        issues.pop("padded_overlaps")
    return {
        "seed": seed,
        "generated_seed": layout.seed,
        "rooms": len(layout.rooms),
        "corridors": len(layout.corridors),
        "issues": issues,
        "ok": all(v == 0 for v in issues.values()),
    }


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(description="Check generated layouts for structural violations")
    parser.add_argument("seeds", nargs="*", type=int)
    parser.add_argument("--preset", default="medium", choices=["small", "medium", "large"])
    parser.add_argument("--structured", action="store_true", help="Disable organic blending")
    args = parser.parse_args(argv)
    seeds = args.seeds or DEFAULT_SEEDS
    results = [run_for_seed(s, args.preset, not args.structured) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
