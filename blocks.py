import enum

from config import MAX_STACK_SIZE
from errors import InvalidMaterial, InvalidStackSize


class Material(enum.Enum):
    '''
    Fixed material catalogue. Each member carries a value (fragility for
    blocks, nourishment for food, damage for tools and weapons) and the
    symbol used in neighbourhood text. Declaration order is the catalogue
    index used by the random item pools.
    '''
    BEDROCK = (-1.0, '*')
    CHEST = (0.1, 'C')
    SAND = (0.5, 'n')
    DIRT = (0.5, 'd')
    GRASS = (0.6, 'g')
    STONE = (1.5, 's')
    GRANITE = (1.5, 'r')
    OBSIDIAN = (5.0, 'o')
    WATER_BUCKET = (1.0, 'W')
    APPLE = (4.0, 'A')
    BREAD = (5.0, 'B')
    BEEF = (8.0, 'F')
    IRON_SHOVEL = (0.2, '>')
    IRON_PICKAXE = (0.5, '^')
    WOOD_SWORD = (1.0, 'i')
    IRON_SWORD = (2.0, 'I')
    LAVA = (1.0, '#')
    WATER = (0.0, '@')

    def __init__(self, value, symbol):
        # value is taken by Enum for the member tuple
        self.strength = value
        self.symbol = symbol

    def is_block(self):
        return self in BLOCK_MATERIALS

    def is_liquid(self):
        return self in LIQUID_MATERIALS

    def is_edible(self):
        return self in EDIBLE_MATERIALS

    def is_tool(self):
        return self in TOOL_MATERIALS

    def is_weapon(self):
        return self in WEAPON_MATERIALS

    def __str__(self):
        return self.name


MATERIALS = list(Material)

LIQUID_MATERIALS = frozenset([Material.LAVA, Material.WATER])
BLOCK_MATERIALS = frozenset([
    Material.BEDROCK, Material.CHEST, Material.SAND, Material.DIRT, Material.GRASS,
    Material.STONE, Material.GRANITE, Material.OBSIDIAN]) | LIQUID_MATERIALS
EDIBLE_MATERIALS = frozenset([Material.WATER_BUCKET, Material.APPLE, Material.BREAD, Material.BEEF])
TOOL_MATERIALS = frozenset([Material.IRON_SHOVEL, Material.IRON_PICKAXE])
WEAPON_MATERIALS = frozenset([Material.WOOD_SWORD, Material.IRON_SWORD])


def random_item(rng, first, last):
    """ Return a material drawn uniformly from catalogue indices
    `first`..`last` (inclusive) using the caller's random generator.

    """
    return MATERIALS[rng.randint(first, last)]


class ItemStack(object):
    '''
    A stack of one material. Tools and weapons stack to exactly 1,
    everything else to 1..MAX_STACK_SIZE. The bound is checked on every
    assignment of `amount`, not only at construction.
    '''
    def __init__(self, material, amount):
        self.material = material
        self._amount = None
        self.amount = amount

    @staticmethod
    def valid_amount(material, amount):
        if material.is_tool() or material.is_weapon():
            return amount == 1
        return 1 <= amount <= MAX_STACK_SIZE

    @property
    def amount(self):
        return self._amount

    @amount.setter
    def amount(self, amount):
        if not ItemStack.valid_amount(self.material, amount):
            raise InvalidStackSize(self.material, amount)
        self._amount = amount

    def copy(self):
        return ItemStack(self.material, self.amount)

    def __eq__(self, other):
        if not isinstance(other, ItemStack):
            return NotImplemented
        return self.material is other.material and self.amount == other.amount

    def __hash__(self):
        return hash((self.material, self.amount))

    def __repr__(self):
        return f"({self.material},{self.amount})"


class Block(object):
    '''
    A solid or liquid block, optionally carrying the item stack it drops
    when destroyed. Only a CHEST may carry more than one unit.
    '''
    def __init__(self, material, drops=None):
        if not material.is_block():
            raise InvalidMaterial(material)
        self.material = material
        self._drops = None
        self.drops = drops

    @property
    def drops(self):
        return self._drops

    @drops.setter
    def drops(self, drops):
        if drops is not None and self.material is not Material.CHEST and drops.amount != 1:
            raise InvalidStackSize(drops.material, drops.amount)
        self._drops = drops

    def set_drops(self, material, amount):
        self.drops = ItemStack(material, amount)

    def is_liquid(self):
        return self.material.is_liquid()

    def breaks(self, damage):
        return self.material.strength >= 0 and damage >= self.material.strength

    def copy(self):
        return Block(self.material, self.drops.copy() if self.drops is not None else None)

    def __eq__(self, other):
        if not isinstance(other, Block):
            return NotImplemented
        return self.material is other.material and self.drops == other.drops

    def __hash__(self):
        return hash((self.material, self.drops))

    def __repr__(self):
        return f"[{self.material}]"
