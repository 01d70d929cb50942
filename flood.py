'''
flood.py -- liquid flood fill
'''

from blocks import Block
from location import NEIGHBOR_OFFSETS
from errors import InvalidLocation, InvalidMaterial


def flood_fill(store, source, material):
    """ Fill the void connected to `source` with `material` liquid.

    The liquid spreads sideways and downward through the 26-neighbourhood
    but never upward, never outside the world and never into an existing
    block. Presence in the block map doubles as the visited set, so an
    explicit stack replaces recursion.

    Parameters
    ----------
    store : VoxelStore
    source : tuple of ints of len 3
    material : Material, must be a liquid

    Returns
    -------
    count : number of liquid blocks placed

    """
    if not material.is_liquid():
        raise InvalidMaterial(material)
    if not store.in_bounds(source):
        raise InvalidLocation(f"{source} is outside the world.")
    blocks = store.blocks
    stack = [source]
    placed = 0
    while stack:
        position = stack.pop()
        if position in blocks:
            continue
        store.place_block(position, Block(material))
        placed += 1
        x, y, z = position
        for dx, dy, dz in NEIGHBOR_OFFSETS:
            if dy > 0:
                continue
            neighbor = (x + dx, y + dy, z + dz)
            if neighbor not in blocks and store.in_bounds(neighbor):
                stack.append(neighbor)
    return placed
