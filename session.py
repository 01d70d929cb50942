'''
session.py -- command-driven play on top of a generated world

A GameSession owns the current World and is handed to whatever needs it;
there is no global game instance.
'''

from world import World
from blocks import Block
from entity import CreatureKind
from errors import WorldError, UnknownCommand
import logutil


class GameSession(object):
    def __init__(self):
        self.world = None
        self.errors = []

    @property
    def player(self):
        return self.world.player

    def create_world(self, seed, size, name):
        self.world = World(seed, size, name)
        logutil.log("SESSION", f"created world {name} seed={seed} size={size}")
        return self.world

    def move_player(self, dx, dy, dz):
        """ Move the player by (dx, dy, dz) and pick up the items there.

        Liquids hurt the player by their strength. Returns the collected
        stack, or None.

        """
        player = self.player
        items = player.move(dx, dy, dz)
        block = self.world.block_at(player.location)
        if block is not None and block.is_liquid():
            player.damage(block.material.strength)
        if items is not None:
            player.inventory.append(items)
        return items

    def orientate_player(self, dx, dy, dz):
        return self.player.orientate(dx, dy, dz)

    def select_item(self, position):
        return self.player.select_item(position)

    def use_item(self, times):
        """ Use the stack in the player's hand `times` times on the faced location.

        Food is simply eaten. A block material is placed when the faced
        location is free; otherwise, like any other item, it hits whatever
        is there: a block is destroyed once the damage breaks it (its drops
        stay on the ground), a monster that survives hits back, and a killed
        animal leaves its drops.

        """
        player = self.player
        world = self.world
        item = player.use_item_in_hand(times)
        if item is None or item.material.is_edible():
            return None
        target = player.facing()
        if not target.check():
            return None
        material = item.material
        if material.is_block():
            if world.is_free(target):
                world.place_block(target, Block(material))
                player.take_one_from_hand()
                return target
            damage = 0.1*times
        else:
            damage = material.strength*times

        block = world.block_at(target)
        creature = world.creature_at(target)
        if block is not None:
            if not block.is_liquid() and block.breaks(damage):
                world.destroy_block(target)
        elif creature is not None:
            creature.damage(damage)
            if creature.kind is CreatureKind.MONSTER:
                if creature.is_dead():
                    world.kill_creature(target)
                else:
                    player.damage(0.5*times)
            elif creature.is_dead():
                world.kill_creature(target)
                world.place_items(target, creature.drops())
        return target

    def neighbourhood_string(self, location):
        """ Describe the 3x3x3 neighbourhood of `location` as text.

        One line per z slice, from -1 to +1; within a line one group per
        elevation from +1 down to -1, each group listing x from -1 to +1.
        'X' is outside the world, 'P' the player, otherwise the symbol of
        the block, creature or items there, or '.' when empty.

        """
        world = self.world
        player_location = world.player_location
        lines = []
        for dz in (-1, 0, 1):
            groups = []
            for dy in (1, 0, -1):
                chars = []
                for dx in (-1, 0, 1):
                    loc = location.offset(dx, dy, dz)
                    if not loc.check():
                        chars.append('X')
                        continue
                    if loc == player_location:
                        chars.append('P')
                        continue
                    block = world.block_at(loc)
                    creature = world.creature_at(loc)
                    items = world.items_at(loc)
                    if block is not None:
                        chars.append(block.material.symbol)
                    elif creature is not None:
                        chars.append(creature.symbol)
                    elif items is not None:
                        chars.append(items.material.symbol)
                    else:
                        chars.append('.')
                groups.append(''.join(chars))
            lines.append(' '.join(groups))
        return '\n'.join(lines)

    def show_player_info(self):
        player = self.player
        return player.describe() + "\n" + self.neighbourhood_string(player.location)

    def execute(self, line):
        """ Run one command line; returns its text output or None. """
        words = line.split()
        if not words:
            return None
        command, args = words[0], words[1:]
        if command == 'move':
            dx, dy, dz = (int(a) for a in args[:3])
            self.move_player(dx, dy, dz)
        elif command == 'orientate':
            dx, dy, dz = (int(a) for a in args[:3])
            self.orientate_player(dx, dy, dz)
        elif command == 'useItem':
            self.use_item(int(args[0]) if args else 1)
        elif command == 'selectItem':
            position, = (int(a) for a in args[:1])
            self.select_item(position)
        elif command == 'show':
            return self.show_player_info()
        else:
            raise UnknownCommand(command)
        return None

    def play(self, lines):
        """ Create a world from the first line ('seed size name') and run the
        remaining commands until they run out or the player dies.

        Failed commands are logged and recorded in `errors`; they never stop
        the session. Returns the list of command outputs.

        """
        lines = iter(lines)
        output = []
        header = next(lines, '')
        try:
            seed, size, name = header.strip().split(' ', 2)
            self.create_world(int(seed), int(size), name)
        except ValueError as e:
            logutil.log("SESSION", f"bad world line {header.strip()!r}: {e}", level="WARNING")
            self.errors.append(f"expected a first line 'seed size name', got {header.strip()!r}")
            return output
        for line in lines:
            if self.player.is_dead():
                break
            try:
                text = self.execute(line)
            except (WorldError, ValueError) as e:
                logutil.log("SESSION", f"{line.strip()!r}: {e}", level="WARNING")
                self.errors.append(str(e))
                continue
            if text is not None:
                output.append(text)
        return output
