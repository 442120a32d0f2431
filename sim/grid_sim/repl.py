"""
Swiss Grid Simulator - Interactive REPL
========================================
"""

import cmd
from typing import Optional

from grid_sim.display import InfoBoard
from grid_sim.errors import ConfigurationError
from grid_sim.format import print_catalog, print_info, print_plants, print_summary, print_turns
from grid_sim.game import GameLoop
from grid_sim.io import load_game_config, load_plant_catalog, parse_building_type


class GridREPL(cmd.Cmd):
    intro = (
        "\n"
        "================================================\n"
        "  Swiss Grid Simulator - Interactive Mode\n"
        "================================================\n"
        "Type 'help' for commands. Type 'catalog' for plant types.\n"
    )
    prompt = "grid> "

    def __init__(self, config_path: Optional[str] = None, plants_path: Optional[str] = None):
        super().__init__()
        self.config_path = config_path
        self.plants_path = plants_path
        self.board: Optional[InfoBoard] = None
        self.game: Optional[GameLoop] = None
        self._new_game()

    def _new_game(self):
        config = load_game_config(self.config_path) if self.config_path else load_game_config()
        catalog = load_plant_catalog(self.plants_path) if self.plants_path else load_plant_catalog()
        self.board = InfoBoard()
        self.game = GameLoop(config, catalog, self.board)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def do_turn(self, arg):
        """Advance the game: turn [count]"""
        try:
            count = int(arg) if arg.strip() else 1
        except ValueError:
            print("Usage: turn [count]")
            return
        for _ in range(count):
            if self.game.is_over():
                print("Game over. Type 'new' to start again.")
                break
            snap = self.game.next_turn()
            print(f"Turn {snap.turn}: money={snap.money}, "
                  f"winter surplus={snap.surplus_winter:.0f}, pollution={snap.pollution}")

    def do_build(self, arg):
        """Start a build: build <slot> <type>"""
        parts = arg.split()
        if len(parts) < 2:
            print("Usage: build <slot> <type>")
            return
        try:
            slot = int(parts[0])
            plant_type = parse_building_type(parts[1])
            if self.game.build(slot, plant_type):
                print(f"Building {plant_type.value} in slot {slot}")
            else:
                print("Slot busy or not enough money")
        except (ValueError, IndexError, ConfigurationError) as e:
            print(f"Error: {e}")

    def do_toggle(self, arg):
        """Flip a plant's switch: toggle <plant_id>"""
        plant_id = arg.strip()
        try:
            if self.game.toggle_plant(plant_id):
                pp = self.game.resources.get_plant(plant_id)
                print(f"{plant_id} is now {'on' if pp.is_alive() else 'off'}")
            else:
                print(f"{plant_id} has reached the end of its life cycle")
        except KeyError:
            print(f"Unknown plant: {plant_id}")

    def do_import(self, arg):
        """Set the import slider: import <fraction 0-1>"""
        try:
            self.game.set_import_fraction(float(arg))
            print(f"Import fraction: {self.game.resources.import_fraction:.2f}")
        except ValueError:
            print("Usage: import <fraction 0-1>")

    def do_show(self, arg):
        """Show the info boxes"""
        print_info(self.board.data)

    def do_plants(self, arg):
        """List the plant fleet"""
        print_plants(self.game.resources.plants)

    def do_slots(self, arg):
        """List the build slots"""
        for i, bb in enumerate(self.game.resources.build_buttons):
            if bb.is_building:
                print(f"  {i}: {bb.plant_type.value} ({bb.turns_remaining} turns left)")
            else:
                print(f"  {i}: free")

    def do_catalog(self, arg):
        """List buildable plant types"""
        print_catalog(self.game.catalog)

    def do_history(self, arg):
        """Show the turn history"""
        print_turns(self.game.history)
        print_summary(self.game.history)

    def do_new(self, arg):
        """Start a new game"""
        self._new_game()
        print("New game started")

    def do_quit(self, arg):
        """Exit"""
        return True

    do_exit = do_quit
    do_EOF = do_quit
