import math
import itertools

from config import UPPER_Y_VALUE
from errors import InvalidLocation

# Offsets of the 26 adjacent positions of a block.
NEIGHBOR_OFFSETS = [d for d in itertools.product((-1, 0, 1), repeat=3) if d != (0, 0, 0)]


def world_limits(size):
    """ Return the (negative, positive) x/z limits of a world of `size`.

    Odd sizes are symmetric around 0; even sizes are one short on the
    negative side, e.g. size 51 spans -25..25 and size 50 spans -24..25.

    """
    positive = size // 2
    negative = -(positive - 1) if size % 2 == 0 else -positive
    return negative, positive


def normalize(position):
    """ Accepts `position` of arbitrary precision and returns the block
    containing that position.

    Parameters
    ----------
    position : tuple of len 3

    Returns
    -------
    block_position : tuple of ints of len 3

    """
    x, y, z = position
    return (int(math.floor(x)), int(math.floor(y)), int(math.floor(z)))


def in_bounds(size, key):
    negative, positive = world_limits(size)
    x, y, z = key
    return negative <= x <= positive and 0 <= y <= UPPER_Y_VALUE and negative <= z <= positive


class Location(object):
    '''
    An integer block coordinate scoped to one world. Real coordinates are
    floored on construction. Locations are immutable and hashable.
    '''
    __slots__ = ('world', 'x', 'y', 'z')

    def __init__(self, world, x, y, z):
        x, y, z = normalize((x, y, z))
        object.__setattr__(self, 'world', world)
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)
        object.__setattr__(self, 'z', z)

    def __setattr__(self, name, value):
        raise AttributeError('Location is immutable')

    @property
    def key(self):
        return (self.x, self.y, self.z)

    def check(self):
        """True if the location lies within the bounds of its world."""
        return in_bounds(self.world.size, self.key)

    def offset(self, dx, dy, dz):
        return Location(self.world, self.x + dx, self.y + dy, self.z + dz)

    def above(self):
        if self.y >= UPPER_Y_VALUE:
            raise InvalidLocation(f"{self} is already at the highest elevation.")
        return self.offset(0, 1, 0)

    def below(self):
        if self.y <= 0:
            raise InvalidLocation(f"{self} is at elevation zero, negatives not allowed.")
        return self.offset(0, -1, 0)

    def neighborhood(self):
        """ Return the set of the 26 adjacent locations that lie within
        the world bounds.

        """
        return set(loc for loc in (self.offset(*d) for d in NEIGHBOR_OFFSETS) if loc.check())

    def is_adjacent(self, other):
        return (self.world == other.world and self != other and
                max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z)) == 1)

    def distance(self, other):
        if self.world != other.world:
            raise InvalidLocation(f"Cannot measure distance between {self.world} and {other.world}")
        return math.sqrt((self.x - other.x)**2 + (self.y - other.y)**2 + (self.z - other.z)**2)

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return self.key == other.key and self.world == other.world

    def __hash__(self):
        return hash((self.world, self.key))

    def __repr__(self):
        return f"Location{{world={self.world},x={self.x},y={self.y},z={self.z}}}"
