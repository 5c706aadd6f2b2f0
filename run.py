"""PCG Maps CLI entry point.

Provides subcommands for the Bomberman generator, the Bomberman parameter
grid search, the cellular automaton cave demo and the drunk agent demo.
Accepts configuration via flags and environment variables, with optional
.env loading.

Run `python run.py --help` for details.
"""

import argparse
import sys
from textwrap import dedent

from dotenv import load_dotenv

from pcg.errors import ConfigError
from pcg.render import banner, color_supported, render_grid


def _load_version() -> str:
    try:
        with open("VERSION", "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    PCG Maps

    Generate Bomberman tile maps and cave maps (cellular automaton / drunk
    agent) and print them to the console. Parameters can be provided via CLI
    flags or environment variables. If both are present, CLI flags take
    precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          PCG_SEED                      Seed used by any generator without an explicit seed
          PCG_BOMBERMAN_<FIELD>         e.g. PCG_BOMBERMAN_P_ENEMY=0.1, PCG_BOMBERMAN_SAFE_CORNERS=1
          PCG_AUTOMATON_<FIELD>         e.g. PCG_AUTOMATON_MODE=inplace
          PCG_DRUNK_<FIELD>             e.g. PCG_DRUNK_WALKS=12
          PCG_LOG_LEVEL                 debug | info | warn | error (default: info)
          PCG_LOG_JSON                  1 to emit JSON log records on stderr

        Examples:
          # Bomberman map with the default densities
          python run.py bomberman

          # Denser map with spawn-safe corners and a fixed seed
          python run.py bomberman --p-destructible 0.5 --safe-corners --seed 42

          # Brute-force the best density triple
          python run.py search

          # In-place cellular automaton
          python run.py automaton --mode inplace --iterations 4

          # Drunk agent walk
          python run.py drunk --walks 10 --steps 8
        """
    )

    parser = argparse.ArgumentParser(
        prog="pcg",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"PCG Maps {__version__}",
    )
    parser.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable coloured output even on a terminal",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        choices=["debug", "info", "warn", "error"],
        help="Log threshold for stderr records (default: env PCG_LOG_LEVEL or info)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # bomberman subcommand
    bm = subparsers.add_parser(
        "bomberman",
        help="Generate and print one Bomberman map",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    bm.add_argument("--size", type=int, default=None, help="Map side length (default: 15)")
    bm.add_argument("--p-destructible", dest="p_destructible", type=float, default=None, help="Block density over free cells (default: 0.4)")
    bm.add_argument("--p-power", dest="p_power", type=float, default=None, help="Share of blocks hiding a power-up (default: 0.1)")
    bm.add_argument("--p-enemy", dest="p_enemy", type=float, default=None, help="Enemy density over non-block cells (default: 0.05)")
    bm.add_argument("--safe-corners", dest="safe_corners", action="store_true", default=None, help="Clear the four interior corners after placement")
    bm.add_argument("--seed", type=int, default=None, help="RNG seed (default: env PCG_SEED or random)")
    bm.set_defaults(command="bomberman")

    # search subcommand
    search = subparsers.add_parser(
        "search",
        help="Grid-search density triples and print the best-scoring map",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    search.add_argument("--size", type=int, default=None, help="Map side length (default: 15)")
    search.add_argument("--safe-corners", dest="safe_corners", action="store_true", default=None, help="Clear the four interior corners after placement")
    search.add_argument("--seed", type=int, default=None, help="RNG seed shared by the whole sweep")
    search.set_defaults(command="search")

    # automaton subcommand
    ca = subparsers.add_parser(
        "automaton",
        help="Noise seeded cellular automaton cave",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    ca.add_argument("--rows", type=int, default=None, help="Map rows (default: 25)")
    ca.add_argument("--cols", type=int, default=None, help="Map columns (default: 40)")
    ca.add_argument("--radius", type=int, default=None, help="Neighbourhood radius R (default: 1)")
    ca.add_argument("--threshold", type=int, default=None, help="Occupied count U to become filled (default: 5)")
    ca.add_argument("--iterations", type=int, default=None, help="Automaton steps (default: 3)")
    ca.add_argument("--density", type=float, default=None, help="Initial noise density (default: 0.45)")
    ca.add_argument("--mode", choices=["double", "inplace"], default=None, help="Sweep strategy (default: double)")
    ca.add_argument("--seed", type=int, default=None, help="RNG seed (default: env PCG_SEED or random)")
    ca.set_defaults(command="automaton")

    # drunk subcommand
    da = subparsers.add_parser(
        "drunk",
        help="Drunk agent corridor and room carver",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    da.add_argument("--rows", type=int, default=None, help="Map rows (default: 25)")
    da.add_argument("--cols", type=int, default=None, help="Map columns (default: 40)")
    da.add_argument("--walks", type=int, default=None, help="Number of walks J (default: 8)")
    da.add_argument("--steps", type=int, default=None, help="Steps per walk I (default: 12)")
    da.add_argument("--room-rows", dest="room_rows", type=int, default=None, help="Room height (default: 5)")
    da.add_argument("--room-cols", dest="room_cols", type=int, default=None, help="Room width (default: 4)")
    da.add_argument("--seed", type=int, default=None, help="RNG seed (default: env PCG_SEED or random)")
    da.set_defaults(command="drunk")

    # If no subcommand provided, default to bomberman
    if len(argv) == 0:
        argv = ["bomberman"]

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "bomberman"
    return args


def _opts(args: argparse.Namespace, *names: str) -> dict:
    return {n: getattr(args, n, None) for n in names}


def _run_bomberman(args, color: bool) -> int:
    from pcg.bomberman import BombermanConfig, BombermanGenerator, score_map

    cfg = BombermanConfig.from_env(**_opts(args, "size", "p_destructible", "p_power", "p_enemy", "safe_corners", "seed"))
    gen = BombermanGenerator(cfg)
    result = gen.generate()
    print(
        banner(
            "Bomberman Map",
            [
                ("Seed", gen.seed),
                ("Size", f"{cfg.size}x{cfg.size}"),
                ("Blocks", cfg.p_destructible),
                ("Power ups", cfg.p_power),
                ("Enemies", cfg.p_enemy),
                ("Safe corners", "YES" if cfg.safe_corners else "NO"),
            ],
            color=color,
        )
    )
    print(render_grid(result.grid, width=3, color=color))
    print()
    print(f"Exit:                  {result.exit_position}")
    print(f"Score:                 {score_map(result.grid)}")
    print(f"Elapsed:               {result.metrics['runtime_us']} us")
    return 0


def _run_search(args, color: bool) -> int:
    from pcg.bomberman import BombermanConfig, BombermanGenerator, grid_search

    cfg = BombermanConfig.from_env(**_opts(args, "size", "safe_corners", "seed"))
    gen = BombermanGenerator(cfg)
    best = grid_search(gen)
    print(banner("Bomberman Grid Search", [("Seed", gen.seed), ("Evaluated", best.evaluated)], color=color))
    print("Best parameters found:")
    print(f"Destructible walls:    {best.p_destructible}")
    print(f"Power ups:             {best.p_power}")
    print(f"Enemies:               {best.p_enemy}")
    print(f"Score:                 {best.score}")
    print()
    print(render_grid(best.grid, width=4, color=color))
    return 0


def _run_automaton(args, color: bool) -> int:
    from pcg.cave import AutomatonConfig, generate_cave

    cfg = AutomatonConfig.from_env(
        **_opts(args, "rows", "cols", "radius", "threshold", "iterations", "density", "mode", "seed")
    )
    cave = generate_cave(cfg)
    total = cfg.rows * cfg.cols
    print(
        banner(
            "Cellular Automaton",
            [
                ("Seed", cave.metrics["seed"]),
                ("Size", f"{cfg.rows}x{cfg.cols}"),
                ("Radius", cfg.radius),
                ("Threshold", cfg.threshold),
                ("Mode", cfg.mode.value),
                ("Density", cfg.density),
            ],
            color=color,
        )
    )
    print("Initial random map:")
    print(render_grid(cave.initial, width=2, right=False, color=color))
    for i, (snapshot, filled) in enumerate(zip(cave.snapshots, cave.fill_history), start=1):
        print()
        print(f"--- Cellular Automaton Iteration {i}/{cfg.iterations} ---")
        print(render_grid(snapshot, width=2, right=False, color=color))
        print(f"Filled cells after iteration {i}: {filled}/{total}")
    print(f"Fill:                  {cave.metrics['fill_ratio'] * 100:.1f}%")
    print(f"Elapsed:               {cave.metrics['runtime_us']} us")
    return 0


def _run_drunk(args, color: bool) -> int:
    from pcg.cave import DrunkAgentConfig, generate_drunk_map

    cfg = DrunkAgentConfig.from_env(**_opts(args, "rows", "cols", "walks", "steps", "room_rows", "room_cols", "seed"))
    dm = generate_drunk_map(cfg)
    total = cfg.rows * cfg.cols
    print(
        banner(
            "Drunk Agent",
            [
                ("Seed", dm.metrics["seed"]),
                ("Size", f"{cfg.rows}x{cfg.cols}"),
                ("Walks", f"J={cfg.walks} I={cfg.steps}"),
                ("Room size", f"{cfg.room_rows}x{cfg.room_cols}"),
                ("Start", dm.start),
            ],
            color=color,
        )
    )
    print("Initial map:")
    print(render_grid(dm.initial, width=2, right=False, color=color))
    print("Final map:")
    print(render_grid(dm.grid, width=2, right=False, color=color))
    print(f"Final agent position:  {dm.agent.position}")
    print(f"Rooms stamped:         {len(dm.agent.rooms)}")
    print(f"Filled cells:          {dm.metrics['filled']}/{total}")
    print(f"Elapsed:               {dm.metrics['runtime_us']} us")
    return 0


COMMANDS = {
    "bomberman": _run_bomberman,
    "search": _run_search,
    "automaton": _run_automaton,
    "drunk": _run_drunk,
}


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    # Load .env if requested, else the default .env if present (no error if missing)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    from pcg import logging_utils

    if args.log_level:
        logging_utils.set_level(args.log_level)
    color = color_supported() and not args.no_color
    mode = args.command
    logging_utils.log.info(event="startup", mode=mode, version=__version__)
    try:
        return COMMANDS[mode](args, color)
    except ConfigError as e:
        print(f"[ERROR] {e}")
        return 1


def _console_main() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
