#std/external libs
import time
import math
import random
import numpy

#local libs
from config import UPPER_Y_VALUE, SEA_LEVEL, MAX_HEALTH
from blocks import Block, ItemStack, Material, random_item
from carving import CarveWalker
from entity import Creature, CreatureKind
from flood import flood_fill
from location import Location, world_limits
from player_entity import Player
from simplex import NoiseSource
import config
import logutil

BEDROCK = Material.BEDROCK
STONE = Material.STONE
DIRT = Material.DIRT
SAND = Material.SAND
GRASS = Material.GRASS
WATER = Material.WATER
LAVA = Material.LAVA


def vein_block(material):
    """Vein blocks always drop one unit of their own material."""
    block = Block(material)
    block.set_drops(material, 1)
    return block


class TerrainGenerator(object):
    '''
    Generates a whole world in one pass:

    1. height synthesis from two combined noise fields and a selector field
    2. strata: bedrock floor, stone, dirt
    3. cave worms (subtractive)
    4. granite and obsidian vein worms (additive, replace existing blocks only)
    5. water and lava sources expanded by flood fill
    6. surface decoration: sand/grass, creatures and items
    7. player spawn above column (0, 0)

    All randomness comes from one random.Random seeded with the world seed and
    is drawn in the order of the steps above, so the same (seed, size)
    always yields the same world. Noise fields are pure functions of the
    world seed and do not touch the generator.
    '''

    def __init__(self, world):
        self.world = world
        self.store = world.store
        self.size = world.size
        self.seed = world.seed
        self.rng = random.Random(world.seed)
        self.negative_limit, self.positive_limit = world_limits(world.size)
        seed = world.seed
        self.low_noise = NoiseSource(seed + config.NOISE_SALT_LOW)
        self.high_noise = NoiseSource(seed + config.NOISE_SALT_HIGH)
        self.selector_noise = NoiseSource(seed + config.NOISE_SALT_SELECTOR, octaves=6)
        self.dirt_noise = NoiseSource(seed + config.NOISE_SALT_DIRT)
        self.sand_noise = NoiseSource(seed + config.NOISE_SALT_SAND)
        idx = numpy.arange(self.size, dtype=float)
        # column grid in array coordinates (0..size-1)
        self.X, self.Z = numpy.meshgrid(idx, idx, indexing='ij')

    def generate(self):
        t0 = time.perf_counter()
        stages = (
            ('heights', self.synthesize_heights),
            ('strata', self.place_strata),
            ('caves', self.carve_caves),
            ('veins', self.carve_veins),
            ('liquids', self.seed_liquids),
            ('surface', self.decorate_surface),
            ('player', self.place_player),
        )
        for name, stage in stages:
            logutil.set_stage(name)
            t = time.perf_counter()
            result = stage()
            logutil.log("MAPGEN", f"{self.world} {name}: {result} in {(time.perf_counter() - t)*1000.0:.1f}ms")
        logutil.set_stage(None)
        logutil.log("MAPGEN", f"generated {self.world} seed={self.seed} size={self.size} "
                    f"blocks={len(self.store.blocks)} in {(time.perf_counter() - t0)*1000.0:.1f}ms")
        return self.world

    def _columns(self):
        for ix in range(self.size):
            for iz in range(self.size):
                yield ix, iz, ix + self.negative_limit, iz + self.negative_limit

    def _random_start(self):
        rng = self.rng
        x = rng.randrange(self.size) + self.negative_limit
        y = rng.randrange(UPPER_Y_VALUE)
        z = rng.randrange(self.size) + self.negative_limit
        return (x, y, z)

    def synthesize_heights(self):
        """ Compute the base terrain height of every column.

        A 'low' and a 'high' estimate are blended by a third noise field used
        as a binary selector: where it is positive the low estimate wins,
        elsewhere the higher of both, which gives plains next to sharper
        relief. The result is halved, damped when negative, floored and
        offset by sea level.

        """
        X = self.X*config.HEIGHT_STEP
        Z = self.Z*config.HEIGHT_STEP
        low = self.low_noise.noise2(X, Z)/6.0 - 4.0
        high = self.high_noise.noise2(X, Z)/5.0 + 6.0
        select_low = self.selector_noise.noise3(self.X, self.Z, 0.5, 2.0)/8.0 > 0.0
        height = numpy.where(select_low, low, numpy.maximum(high, low))
        height = height/2.0
        height = numpy.where(height < 0.0, height*config.NEGATIVE_HEIGHT_DAMPING, height)
        self.base_heights = numpy.clip(numpy.floor(height + SEA_LEVEL), 1, UPPER_Y_VALUE - 1).astype(int)
        return f"min={self.base_heights.min()} max={self.base_heights.max()}"

    def place_strata(self):
        rng = self.rng
        store = self.store
        thickness = self.dirt_noise.noise3(self.X, self.Z, 0.5, 2.0)/24.0 - 4.0
        placed = 0
        for ix, iz, x, z in self._columns():
            top = int(self.base_heights[ix, iz])
            stone_top = top + thickness[ix, iz]
            for y in range(top + 1):
                if y == 0:
                    material = BEDROCK
                elif y <= stone_top:
                    material = STONE
                else:
                    material = DIRT
                block = Block(material)
                if rng.random() < config.DROPS_CHANCE:
                    block.set_drops(material, 1)
                store.place_block((x, y, z), block)
                placed += 1
        return f"{placed} blocks"

    def carve_caves(self):
        rng = self.rng
        store = self.store
        count = self.size*self.size*(UPPER_Y_VALUE + 1)//config.CAVE_VOLUME_PER_WORM
        walker = CarveWalker(rng, config.CAVE_PHI_DAMPING, config.CAVE_STAMP_CHANCE, config.CAVE_JITTER)
        mid = SEA_LEVEL/2.0
        carved = [0]

        def carve(position):
            if store.carve(position):
                carved[0] += 1

        for _ in range(count):
            start = self._random_start()
            length = rng.random()*rng.random()*config.CAVE_MAX_LENGTH
            theta = rng.random()*math.pi*2
            phi = rng.random()*math.pi*2
            cave_radius = rng.random()*rng.random()

            def radius_at(center_y, taper, cave_radius=cave_radius):
                # widest halfway between the floor and sea level
                depth = max(0.0, 1.0 - abs(center_y - mid)/mid)
                return (1.2 + (depth*3.5 + 1.0)*cave_radius)*taper

            walker.walk(start, length, theta, phi, radius_at, carve)
        return f"{count} worms, {carved[0]} blocks removed"

    def carve_veins(self):
        rng = self.rng
        store = self.store
        walker = CarveWalker(rng, config.VEIN_PHI_DAMPING)
        summary = []
        for name, abundance in config.VEINS:
            material = Material[name]
            count = int(self.size*self.size*(UPPER_Y_VALUE + 1)*abundance/config.VEIN_VOLUME_PER_WORM)
            replaced = [0]

            def lay(position, material=material, replaced=replaced):
                if store.replace(position, vein_block(material)):
                    replaced[0] += 1

            for _ in range(count):
                start = self._random_start()
                length = rng.random()*rng.random()*config.VEIN_MAX_LENGTH*abundance
                theta = rng.random()*math.pi*2
                phi = rng.random()*math.pi*2

                def radius_at(center_y, taper, abundance=abundance):
                    return abundance*taper + 1.0

                walker.walk(start, length, theta, phi, radius_at, lay)
            summary.append(f"{material}: {count} worms, {replaced[0]} blocks")
        return ", ".join(summary)

    def seed_liquids(self):
        rng = self.rng
        store = self.store
        area = self.size*self.size
        water = 0
        for _ in range(int(area*config.WATER_SOURCE_DENSITY)):
            x = rng.randrange(self.size) + self.negative_limit
            z = rng.randrange(self.size) + self.negative_limit
            water += flood_fill(store, (x, SEA_LEVEL - 1, z), WATER)
        lava = 0
        for _ in range(int(area*config.LAVA_SOURCE_DENSITY)):
            x = rng.randrange(self.size) + self.negative_limit
            z = rng.randrange(self.size) + self.negative_limit
            # squared distribution biases lava towards the very bottom
            y = int(rng.random()*rng.random()*(SEA_LEVEL - 3))
            lava += flood_fill(store, (x, y, z), LAVA)
        return f"{water} water, {lava} lava"

    def _random_items(self):
        rng = self.rng
        roll = rng.random()
        if roll < config.FOOD_CHANCE:
            material = random_item(rng, *config.FOOD_POOL)
            return ItemStack(material, rng.randint(1, config.MAX_FOOD_AMOUNT))
        if roll < config.FOOD_CHANCE + config.TOOL_CHANCE:
            return ItemStack(random_item(rng, *config.TOOL_POOL), 1)
        return ItemStack(random_item(rng, *config.WEAPON_POOL), 1)

    def decorate_surface(self):
        """ Cover every column with sand or grass and spawn creatures and
        items just above the surface.

        Per column the generator draws, in order: the drops roll, the spawn
        roll, then only what the spawn needs. Liquid surfaces keep their
        liquid and get no spawns, but their rolls are still drawn.

        """
        rng = self.rng
        store = self.store
        heights = store.heights
        sandy = self.sand_noise.noise3(self.X, self.Z, 0.5, 2.0) > config.SAND_THRESHOLD
        creatures = 0
        stacks = 0
        for ix, iz, x, z in self._columns():
            y = heights.get(x, z)
            surface = (x, y, z)
            above = (x, y + 1, z)
            material = SAND if sandy[ix, iz] else GRASS
            drops = rng.random() < config.DROPS_CHANCE
            spawn = rng.random()
            top = store.block_at(surface)
            liquid = top is not None and top.is_liquid()
            if not liquid and y > 0:
                block = Block(material)
                if drops:
                    block.set_drops(material, 1)
                store.place_block(surface, block)
            if spawn < config.ENTITY_SPAWN_CHANCE:
                kind = CreatureKind.MONSTER if rng.random() < config.MONSTER_CHANCE else CreatureKind.ANIMAL
                health = (1.0 - rng.random())*MAX_HEALTH
                if not liquid:
                    store.place_creature(Creature(kind, Location(self.world, *above), health), above)
                    creatures += 1
            elif spawn < config.ENTITY_SPAWN_CHANCE + config.ITEMS_SPAWN_CHANCE:
                stack = self._random_items()
                if not liquid:
                    store.place_items(above, stack)
                    stacks += 1
        return f"{creatures} creatures, {stacks} item stacks"

    def place_player(self):
        y = self.store.heights.get(0, 0) + 1
        location = Location(self.world, 0, y, 0)
        self.store.place_player(location.key)
        self.world.player = Player(config.PLAYER_NAME, location)
        return f"{self.world.player} at {location.key}"
