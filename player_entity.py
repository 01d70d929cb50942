from config import MAX_FOODLEVEL, MAX_HEALTH, MOVE_FOOD_COST
from entity import LivingEntity
from errors import BadInventoryPosition, EntityIsDead, InvalidLocation


class Player(LivingEntity):
    """
    Represents the player in the world.
    Inherits from LivingEntity and adds a name, a food level and an orientation.
    """
    symbol = 'P'

    def __init__(self, name, location):
        """
        Initializes a new Player standing at `location`, facing +z.

        Args:
            name (str): The player's name.
            location (Location): Where the player stands; must already be
                registered with the world as the player position.
        """
        super().__init__(location, MAX_HEALTH)
        self.name = name
        self._food_level = MAX_FOODLEVEL
        self.orientation = (0, 0, 1)
        self.inventory = []
        self.item_in_hand = None

    @property
    def food_level(self):
        return self._food_level

    @food_level.setter
    def food_level(self, food_level):
        self._food_level = max(0.0, min(food_level, MAX_FOODLEVEL))

    def increase_food_level(self, amount):
        """
        Eats `amount`; whatever exceeds the maximum food level heals the player.
        """
        surplus = self.food_level + amount - MAX_FOODLEVEL
        self.food_level += amount
        if surplus > 0:
            self.health += surplus

    def decrease_food_level(self, amount):
        """
        Spends food; whatever the food level cannot cover is taken from health.
        """
        if self.food_level >= amount:
            self.food_level -= amount
        else:
            self.damage(amount - self.food_level)
            self.food_level = 0.0

    def facing(self):
        """
        Returns the location the player is oriented towards.
        """
        return self.location.offset(*self.orientation)

    def orientate(self, dx, dy, dz):
        """
        Orients the player towards the adjacent location (x+dx, y+dy, z+dz).

        Raises:
            EntityIsDead: if the player is dead.
            InvalidLocation: if the offset is zero or not towards an adjacent location.
        """
        if self.is_dead():
            raise EntityIsDead(self.name)
        if dx == 0 and dy == 0 and dz == 0:
            raise InvalidLocation("a player cannot be oriented towards himself")
        if max(abs(dx), abs(dy), abs(dz)) > 1:
            raise InvalidLocation("the orientation is not towards an adjacent location.")
        self.orientation = (dx, dy, dz)
        return self.facing()

    def move(self, dx, dy, dz):
        """
        Moves the player to the adjacent location (x+dx, y+dy, z+dz).

        The target must be adjacent, inside the world and free. Returns the
        items lying at the target, which are taken out of the world.

        Raises:
            EntityIsDead: if the player is dead.
            InvalidLocation: if the target is not adjacent, not valid or occupied.
        """
        if self.is_dead():
            raise EntityIsDead(self.name)
        target = self.location.offset(dx, dy, dz)
        if not self.location.is_adjacent(target):
            raise InvalidLocation("Location is not adjacent to the current one.")
        if not target.check():
            raise InvalidLocation("Location is not valid.")
        world = self.location.world
        # the world updates self.location along with its own record
        items = world.move_player(target)
        self.decrease_food_level(MOVE_FOOD_COST)
        return items

    def select_item(self, position):
        """
        Takes the stack at inventory `position` into the hand. Whatever was
        in the hand goes to that inventory position.

        Raises:
            BadInventoryPosition: if there is no stack at `position`.
        """
        if not 0 <= position < len(self.inventory):
            raise BadInventoryPosition(position)
        selected = self.inventory[position]
        if self.item_in_hand is None:
            del self.inventory[position]
        else:
            self.inventory[position] = self.item_in_hand
        self.item_in_hand = selected
        return selected

    def use_item_in_hand(self, times):
        """
        Uses the stack in hand `times` times and returns it, or None when
        the hand is empty.

        Food is eaten one unit per use until the stack runs out. Anything
        else costs 0.1 food per use; its effect on the world is up to the
        caller.

        Raises:
            EntityIsDead: if the player is dead.
            ValueError: if `times` is not positive.
        """
        if self.is_dead():
            raise EntityIsDead(self.name)
        if times <= 0:
            raise ValueError("The item has to be used a positive number of times.")
        item = self.item_in_hand
        if item is None:
            return None
        if item.material.is_edible():
            for _ in range(times):
                self.increase_food_level(item.material.strength)
                if item.amount == 1:
                    self.item_in_hand = None
                    break
                item.amount -= 1
        else:
            self.decrease_food_level(0.1*times)
        return item

    def take_one_from_hand(self):
        item = self.item_in_hand
        if item.amount == 1:
            self.item_in_hand = None
        else:
            item.amount -= 1

    def describe(self):
        dx, dy, dz = self.orientation
        return (f"Name={self.name}\n"
                f"{self.location}\n"
                f"Orientation=({dx},{dy},{dz})\n"
                f"Health={self.health}\n"
                f"Food level={self.food_level}\n"
                f"Inventory={self.inventory}\n"
                f"Item in hand={self.item_in_hand}")

    def __repr__(self):
        return self.name
