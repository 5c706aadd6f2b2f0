#!/usr/bin/env python3
"""Bomberman structural diagnostics for specific seeds.

Usage:
  python scripts/diagnose_seeds.py 292372 730727
  PCG_BOMBERMAN_SAFE_CORNERS=1 python scripts/diagnose_seeds.py

If no seeds are provided as CLI args, a default list is used. The rest of the
configuration comes from the usual PCG_BOMBERMAN_* environment variables.
Exits with non-zero status if structural issues are detected.
"""

from __future__ import annotations

import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from pcg.bomberman import BombermanConfig, CellKind, generate_map  # noqa: E402 import after path fix
from pcg.bomberman.placement import interior_corners  # noqa: E402 import after path fix
from pcg.bomberman.structure import is_structural  # noqa: E402 import after path fix

DEFAULT_SEEDS = [292372, 730727]


def run_for_seed(seed: int) -> dict:
    cfg = BombermanConfig.from_env(seed=seed)
    m = generate_map(cfg)
    grid = m.grid
    size = cfg.size
    exits = [p for p in grid.positions() if grid[p].kind is CellKind.EXIT]
    broken = [p for p in grid.positions() if is_structural(p[0], p[1], size) and grid[p].kind is not CellKind.WALL]
    blocked = []
    if cfg.safe_corners:
        blocked = [p for p in interior_corners(size) if grid[p].kind is not CellKind.WALL and grid[p].kind is not CellKind.EMPTY]
    issues = {
        "extra_exits": max(0, len(exits) - 1),
        "missing_exit": int(not exits and m.placement.destructible_target >= 1),
        "structure_violations": len(broken),
        "blocked_corners": len(blocked),
    }
    info = {
        "exit": m.exit_position,
        "enemy_target": m.placement.enemy_target,
        "enemies_placed": m.placement.enemies_placed,
    }
    return {"seed": seed, "issues": issues, "info": info, "ok": all(v == 0 for v in issues.values())}


def main(argv: List[str]) -> int:
    seeds = [int(a) for a in argv] if argv else DEFAULT_SEEDS
    results = [run_for_seed(s) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
