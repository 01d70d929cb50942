import enum

from config import MAX_HEALTH
from blocks import ItemStack, Material


class LivingEntity(object):
    """
    The base class for everything alive in the world: creatures and the player.
    Health is clamped to MAX_HEALTH; an entity with health <= 0 is dead.
    """
    symbol = '?'

    def __init__(self, location, health=MAX_HEALTH):
        self.location = location
        self._health = None
        self.health = health

    @property
    def health(self):
        return self._health

    @health.setter
    def health(self, health):
        self._health = min(health, MAX_HEALTH)

    def damage(self, amount):
        self.health = self.health - amount

    def is_dead(self):
        return self.health <= 0


class CreatureKind(enum.Enum):
    MONSTER = 'M'
    ANIMAL = 'L'


class Creature(LivingEntity):
    '''
    A creature occupying one block. Behaviour that differs between monsters
    and animals is decided by matching on `kind`.
    '''
    def __init__(self, kind, location, health=MAX_HEALTH):
        super().__init__(location, health)
        self.kind = kind

    @property
    def symbol(self):
        return self.kind.value

    def drops(self):
        """ Items left behind when the creature is killed. """
        if self.kind is CreatureKind.ANIMAL:
            return ItemStack(Material.BEEF, 1)
        return None

    def __eq__(self, other):
        if not isinstance(other, Creature):
            return NotImplemented
        return (self.kind is other.kind and self.location == other.location
                and self.health == other.health)

    def __hash__(self):
        return hash((self.kind, self.location))

    def __repr__(self):
        return f"{self.kind.name.title()}({self.location}, health={self.health})"
