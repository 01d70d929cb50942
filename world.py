'''
world.py -- a generated block world and its location-checked API

A World is identified by (seed, size, name). All public operations take
Locations and reject locations of other worlds with InvalidLocation.
Mutators hold `lock` for the whole operation, since the height field and
the occupant maps are updated as a unit.
'''

import threading

from location import Location
from world_store import VoxelStore
from flood import flood_fill
from errors import InvalidLocation
import mapgen


class World(object):
    def __init__(self, seed, size, name, generate=True):
        if size <= 0:
            raise ValueError(f"world size must be greater than zero, got {size}")
        self.seed = seed
        self.size = size
        self.name = name
        self.lock = threading.RLock()
        self.store = VoxelStore(size)
        self.player = None
        if generate:
            mapgen.TerrainGenerator(self).generate()

    def _position(self, location):
        if location.world != self:
            raise InvalidLocation("Location does not belong to this world.")
        return location.key

    def location(self, x, y, z):
        return Location(self, x, y, z)

    @property
    def heights(self):
        return self.store.heights

    @property
    def player_location(self):
        if self.store.player_position is None:
            return None
        return Location(self, *self.store.player_position)

    # Queries

    def block_at(self, location):
        return self.store.block_at(self._position(location))

    def items_at(self, location):
        return self.store.items_at(self._position(location))

    def creature_at(self, location):
        return self.store.creature_at(self._position(location))

    def is_free(self, location):
        return self.store.is_free(self._position(location))

    def neighbors_of(self, location):
        self._position(location)
        return location.neighborhood()

    def neighbor_creatures(self, location):
        return self.store.neighbor_creatures(self._position(location))

    def highest_location_at(self, location):
        """ Return the location of the topmost block in the column of `location`. """
        x, _, z = self._position(location)
        if not self.store.in_bounds((x, 0, z)):
            raise InvalidLocation(f"{location} is outside the world.")
        return Location(self, x, self.store.heights.get(x, z), z)

    # Mutators

    def place_block(self, location, block):
        with self.lock:
            self.store.place_block(self._position(location), block)

    def destroy_block(self, location):
        with self.lock:
            return self.store.destroy_block(self._position(location))

    def place_items(self, location, stack):
        with self.lock:
            self.store.place_items(self._position(location), stack)

    def remove_items(self, location):
        with self.lock:
            return self.store.remove_items(self._position(location))

    def place_creature(self, creature):
        with self.lock:
            self.store.place_creature(creature, self._position(creature.location))

    def kill_creature(self, location):
        with self.lock:
            return self.store.kill_creature(self._position(location))

    def place_player(self, location):
        with self.lock:
            self.store.place_player(self._position(location))
            if self.player is not None:
                self.player.location = location

    def move_player(self, location):
        """ Move the player to `location`; the Player entity follows the
        store. Returns the items picked up there, or None.

        """
        with self.lock:
            items = self.store.move_player(self._position(location))
            if self.player is not None:
                self.player.location = location
            return items

    def flood(self, location, material):
        with self.lock:
            return flood_fill(self.store, self._position(location), material)

    def __eq__(self, other):
        if not isinstance(other, World):
            return NotImplemented
        return self.name == other.name and self.seed == other.seed and self.size == other.size

    def __hash__(self):
        return hash((self.name, self.seed, self.size))

    def __repr__(self):
        return self.name
