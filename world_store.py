'''
world_store.py -- sparse block/item/creature storage with surface height bookkeeping

Positions are integer (x, y, z) tuples. Every mutator validates its input
before touching any map, so a raised error leaves the store unchanged.
'''

from location import in_bounds, NEIGHBOR_OFFSETS
from heightmap import HeightField
from errors import InvalidLocation, OccupiedLocation, NoBlockPresent, NoCreaturePresent, ImmutableFloor


class VoxelStore(object):
    def __init__(self, size):
        self.size = size
        self.blocks = {}
        self.items = {}
        self.creatures = {}
        self.heights = HeightField(size)
        self.player_position = None

    def in_bounds(self, position):
        return in_bounds(self.size, position)

    def _check_bounds(self, position):
        if not self.in_bounds(position):
            raise InvalidLocation(f"{position} is outside the world.")

    def block_at(self, position):
        return self.blocks.get(position)

    def items_at(self, position):
        return self.items.get(position)

    def creature_at(self, position):
        return self.creatures.get(position)

    def is_solid(self, position):
        block = self.blocks.get(position)
        return block is not None and not block.is_liquid()

    def is_free(self, position):
        """ True if `position` lies inside the world and nothing blocks it:
        no solid block, no creature, and not the player. Liquid blocks do
        not block.

        """
        if not self.in_bounds(position) or self.is_solid(position):
            return False
        return position not in self.creatures and position != self.player_position

    def place_block(self, position, block):
        self._check_bounds(position)
        if position == self.player_position and not block.is_liquid():
            raise OccupiedLocation(f"{position} is occupied by the player.")
        self.items.pop(position, None)
        self.creatures.pop(position, None)
        previous = self.blocks.get(position)
        self.blocks[position] = block
        if previous is None:
            x, y, z = position
            if y > self.heights.get(x, z):
                self.heights.set(x, z, y)

    def destroy_block(self, position):
        """ Remove the block at `position` and deposit its drops there.

        Returns the destroyed block. Drops are not deposited on the player's
        position.

        """
        self._check_bounds(position)
        if position[1] == 0:
            raise ImmutableFloor(f"{position} is the bedrock floor.")
        if position not in self.blocks:
            raise NoBlockPresent(f"There is no block at {position}.")
        block = self._remove_block(position)
        # only a liquid can share the player position; nothing is dropped there
        if block.drops is not None and position != self.player_position:
            self.items[position] = block.drops.copy()
        return block

    def _remove_block(self, position):
        block = self.blocks.pop(position)
        x, y, z = position
        if y == self.heights.get(x, z):
            self._recompute_height(x, y - 1, z)
        return block

    def _recompute_height(self, x, y, z):
        # scan down from y to the first block, or elevation 0
        while y > 0 and (x, y, z) not in self.blocks:
            y -= 1
        self.heights.set(x, z, max(y, 0))

    def place_items(self, position, stack):
        self._check_bounds(position)
        if self.is_solid(position) or position == self.player_position:
            raise OccupiedLocation(f"{position} is occupied.")
        self.items[position] = stack

    def remove_items(self, position):
        return self.items.pop(position, None)

    def place_creature(self, creature, position):
        self._check_bounds(position)
        if not self.is_free(position):
            raise OccupiedLocation(f"{position} is occupied.")
        self.creatures[position] = creature

    def kill_creature(self, position):
        if position not in self.creatures:
            raise NoCreaturePresent(f"There is no creature at {position}.")
        return self.creatures.pop(position)

    def neighbor_creatures(self, position):
        x, y, z = position
        result = []
        for dx, dy, dz in NEIGHBOR_OFFSETS:
            p = (x + dx, y + dy, z + dz)
            if p in self.creatures and self.in_bounds(p):
                result.append(self.creatures[p])
        return result

    def place_player(self, position):
        """ Put the player at `position`, evicting any creature or items
        already there. Used when the player spawns.

        """
        self._check_bounds(position)
        if self.is_solid(position):
            raise OccupiedLocation(f"{position} is occupied by a block.")
        self.creatures.pop(position, None)
        self.items.pop(position, None)
        self.player_position = position

    def move_player(self, position):
        """ Move the player to the free `position`; returns the items that
        were lying there (now removed from the world), or None.

        """
        self._check_bounds(position)
        if not self.is_free(position):
            raise OccupiedLocation(f"{position} is occupied.")
        self.player_position = position
        return self.items.pop(position, None)

    # Generation primitives: out-of-world positions and the bedrock floor are skipped.

    def carve(self, position):
        if position[1] <= 0 or position not in self.blocks or not self.in_bounds(position):
            return False
        self.items.pop(position, None)
        self._remove_block(position)
        return True

    def replace(self, position, block):
        if position[1] <= 0 or position not in self.blocks or not self.in_bounds(position):
            return False
        self.blocks[position] = block
        return True
