"""
Swiss Grid Simulator - CLI Entry Point
=======================================
Usage:
    python cli.py simulate [--config game.yaml] [--plants powerplants.yaml] [--turns N]
                           [--import 0.5] [--summer-import] [--build 0:solar]
    python cli.py plants [--plants powerplants.yaml]
    python cli.py interactive
    python cli.py web [--port 8080]
"""

import argparse
import sys

from grid_sim.errors import ConfigurationError
from grid_sim.format import print_catalog, print_full_report, print_info
from grid_sim.game import GameLoop
from grid_sim.io import (
    DEFAULT_GAME_PATH, DEFAULT_PLANTS_PATH,
    load_game_config, load_plant_catalog, parse_building_type,
)


def cmd_simulate(args):
    config = load_game_config(args.config)
    catalog = load_plant_catalog(args.plants)

    if args.summer_import:
        config.import_in_summer = True
        print("[imports] Summer imports enabled")
    if args.turns is not None:
        config.max_turns = args.turns

    game = GameLoop(config, catalog)
    if args.import_fraction is not None:
        game.set_import_fraction(args.import_fraction)
        print(f"[imports] Slider at {game.resources.import_fraction:.0%}")

    for item in args.build or []:
        slot, _, key = item.partition(":")
        plant_type = parse_building_type(key)
        if game.build(int(slot), plant_type):
            print(f"[build] {plant_type.value} in slot {slot}")
        else:
            print(f"[build] Warning: could not start {plant_type.value} in slot {slot}")

    game.run()
    print_full_report(config.name, game.history, game.resources.plants)
    print_info(game.sink.data)


def cmd_plants(args):
    catalog = load_plant_catalog(args.plants)
    print(f"Plant categories: {len(catalog)}")
    print_catalog(catalog)


def cmd_interactive(args):
    from grid_sim.repl import GridREPL
    repl = GridREPL(args.config, args.plants)
    repl.cmdloop()


def main():
    parser = argparse.ArgumentParser(
        description="Swiss Grid Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", help="Command to run")

    # simulate
    p_sim = sub.add_parser("simulate", aliases=["sim"],
                           help="Play a headless game and print the report")
    p_sim.add_argument("--config", "-c", default=str(DEFAULT_GAME_PATH),
                       help="Game config YAML (default: data/game.yaml)")
    p_sim.add_argument("--plants", "-p", default=str(DEFAULT_PLANTS_PATH),
                       help="Plant catalog YAML (default: data/powerplants.yaml)")
    p_sim.add_argument("--turns", "-t", type=int, default=None,
                       help="Number of turns to play (default: config max_turns)")
    p_sim.add_argument("--import", dest="import_fraction", type=float, default=None,
                       help="Import slider fraction in [0, 1]")
    p_sim.add_argument("--summer-import", action="store_true",
                       help="Allow imports in summer")
    p_sim.add_argument("--build", "-b", action="append", default=None,
                       help="Start a build before turn 1 (repeatable): 'slot:type'")

    # plants
    p_pl = sub.add_parser("plants", help="List the plant catalog")
    p_pl.add_argument("--plants", "-p", default=str(DEFAULT_PLANTS_PATH),
                      help="Plant catalog YAML (default: data/powerplants.yaml)")

    # interactive
    p_int = sub.add_parser("interactive", aliases=["repl", "i"],
                           help="Interactive turn-by-turn mode")
    p_int.add_argument("--config", "-c", default=None, help="Game config YAML")
    p_int.add_argument("--plants", "-p", default=None, help="Plant catalog YAML")

    # web
    p_web = sub.add_parser("web", aliases=["serve"],
                           help="Start the JSON API server")
    p_web.add_argument("--port", type=int, default=8080,
                       help="Port to serve on (default: 8080)")

    args = parser.parse_args()

    try:
        if args.command in ("simulate", "sim"):
            cmd_simulate(args)
        elif args.command == "plants":
            cmd_plants(args)
        elif args.command in ("interactive", "repl", "i"):
            cmd_interactive(args)
        elif args.command in ("web", "serve"):
            from grid_sim.web import start_server
            start_server(port=args.port)
        else:
            parser.print_help()
    except (ConfigurationError, FileNotFoundError, IndexError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
