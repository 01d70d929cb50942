'''
errors.py -- recoverable world errors

Every store operation validates before it mutates, so catching one of these
leaves the world exactly as it was.
'''


class WorldError(Exception):
    pass


class InvalidLocation(WorldError):
    """Location of another world, out of bounds, or otherwise meaningless."""


class OccupiedLocation(InvalidLocation):
    """Placement target is not free."""


class NoBlockPresent(WorldError):
    pass


class NoCreaturePresent(WorldError):
    pass


class ImmutableFloor(WorldError):
    """The bedrock floor at elevation 0 cannot be destroyed."""


class InvalidMaterial(WorldError):
    def __init__(self, material):
        super().__init__(f"{material} is not a proper type of material.")
        self.material = material


class InvalidStackSize(WorldError):
    def __init__(self, material, amount):
        super().__init__(f"{amount} is not a valid amount of {material}.")
        self.material = material
        self.amount = amount


class EntityIsDead(WorldError):
    def __init__(self, name='The player'):
        super().__init__(f"{name} is dead")


class UnknownCommand(WorldError):
    def __init__(self, command):
        super().__init__(f"Unknown command: {command}")
        self.command = command


class BadInventoryPosition(WorldError):
    def __init__(self, position):
        super().__init__(f"There is no item at inventory position {position}.")
        self.position = position
