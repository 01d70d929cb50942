import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import config
from blocks import Block, ItemStack, Material
from entity import Creature, CreatureKind
from errors import BadInventoryPosition, EntityIsDead, InvalidLocation, UnknownCommand
from location import world_limits
from player_entity import Player
from session import GameSession
from world import World

config.LOG_GENERATION = False
config.LOG_SESSION = False


def _flat_session(size=3, name="Flat"):
    """A session on an ungenerated world with a bedrock floor and the player at (0, 1, 0)."""
    world = World(1, size, name, generate=False)
    negative, positive = world_limits(size)
    for x in range(negative, positive + 1):
        for z in range(negative, positive + 1):
            world.place_block(world.location(x, 0, z), Block(Material.BEDROCK))
    spot = world.location(0, 1, 0)
    world.place_player(spot)
    world.player = Player(config.PLAYER_NAME, spot)
    session = GameSession()
    session.world = world
    return session


def test_neighbourhood_string():
    session = _flat_session()
    text = session.neighbourhood_string(session.player.location)
    assert text == ("... ... ***\n"
                    "... .P. ***\n"
                    "... ... ***")


def test_neighbourhood_marks_outside_and_occupants():
    session = _flat_session()
    world = session.world
    world.place_items(world.location(-1, 1, 0), ItemStack(Material.APPLE, 2))
    world.place_block(world.location(1, 2, 0), Block(Material.GRANITE))
    assert session.move_player(0, 0, 1) is None
    lines = session.neighbourhood_string(session.player.location).split('\n')
    assert lines[2] == "XXX XXX XXX"
    assert lines[0] == "..r A.. ***"
    assert lines[1] == "... .P. ***"


def test_move_collects_items_and_costs_food():
    session = _flat_session()
    world = session.world
    world.place_items(world.location(1, 1, 0), ItemStack(Material.BREAD, 3))
    picked = session.move_player(1, 0, 0)
    assert picked == ItemStack(Material.BREAD, 3)
    assert session.player.inventory == [ItemStack(Material.BREAD, 3)]
    assert world.items_at(world.location(1, 1, 0)) is None
    assert world.player_location == world.location(1, 1, 0)
    assert session.player.food_level == pytest.approx(config.MAX_FOODLEVEL - config.MOVE_FOOD_COST)


def test_lava_hurts_by_its_strength():
    session = _flat_session()
    world = session.world
    world.place_block(world.location(-1, 1, 0), Block(Material.LAVA))
    session.move_player(-1, 0, 0)
    assert session.player.health == pytest.approx(config.MAX_HEALTH - Material.LAVA.strength)


def test_invalid_moves_leave_player_in_place():
    session = _flat_session()
    start = session.player.location
    with pytest.raises(InvalidLocation):
        session.move_player(0, -1, 0)
    with pytest.raises(InvalidLocation):
        session.move_player(2, 0, 0)
    with pytest.raises(InvalidLocation):
        session.orientate_player(0, 0, 0)
    assert session.player.location == start
    assert session.world.player_location == start


def test_hunger_turns_into_damage():
    session = _flat_session()
    player = session.player
    player.food_level = 0.01
    session.move_player(1, 0, 0)
    assert player.food_level == 0.0
    assert player.health == pytest.approx(config.MAX_HEALTH - (config.MOVE_FOOD_COST - 0.01))


def test_dead_player_cannot_act():
    session = _flat_session()
    session.player.damage(config.MAX_HEALTH)
    with pytest.raises(EntityIsDead):
        session.execute("move 1 0 0")
    with pytest.raises(EntityIsDead):
        session.execute("orientate 1 0 0")


def test_show_player_info():
    session = _flat_session()
    session.orientate_player(1, 0, 0)
    lines = session.show_player_info().split('\n')
    assert lines[0] == "Name=Steve"
    assert lines[1] == "Location{world=Flat,x=0,y=1,z=0}"
    assert lines[2] == "Orientation=(1,0,0)"
    assert lines[3] == f"Health={config.MAX_HEALTH}"
    assert lines[5] == "Inventory=[]"
    assert lines[6] == "Item in hand=None"
    assert lines[7:] == ["... ... ***", "... .P. ***", "... ... ***"]


def test_unknown_command():
    session = _flat_session()
    with pytest.raises(UnknownCommand):
        session.execute("jump")
    assert session.execute("   ") is None


def test_play_records_errors_and_continues():
    session = GameSession()
    output = session.play(["1 10 Scripted World", "show", "fly 1 2 3", "move 0 0 5", "move 1", "show"])
    assert session.world.name == "Scripted World"
    assert session.world.size == 10
    assert len(output) == 2
    assert output[0].startswith("Name=Steve\nLocation{world=Scripted World,x=0,")
    assert len(session.errors) == 3
    assert session.errors[0] == "Unknown command: fly"


def _hold(session, material, amount=1):
    session.player.inventory.append(ItemStack(material, amount))
    session.select_item(len(session.player.inventory) - 1)


def test_select_item_swaps_with_hand():
    session = _flat_session()
    player = session.player
    player.inventory.extend([ItemStack(Material.APPLE, 2), ItemStack(Material.IRON_SWORD, 1)])
    session.execute("selectItem 0")
    assert player.item_in_hand == ItemStack(Material.APPLE, 2)
    assert player.inventory == [ItemStack(Material.IRON_SWORD, 1)]
    session.execute("selectItem 0")
    assert player.item_in_hand == ItemStack(Material.IRON_SWORD, 1)
    assert player.inventory == [ItemStack(Material.APPLE, 2)]
    with pytest.raises(BadInventoryPosition):
        session.execute("selectItem 5")
    with pytest.raises(ValueError):
        session.execute("selectItem")


def test_use_block_places_it_in_front():
    session = _flat_session()
    world = session.world
    _hold(session, Material.DIRT, 2)
    assert session.use_item(1) == world.location(0, 1, 1)
    assert world.block_at(world.location(0, 1, 1)).material is Material.DIRT
    assert session.player.item_in_hand == ItemStack(Material.DIRT, 1)
    assert session.player.food_level == pytest.approx(config.MAX_FOODLEVEL - 0.1)
    session.orientate_player(1, 0, 0)
    session.use_item(1)
    assert world.block_at(world.location(1, 1, 0)).material is Material.DIRT
    assert session.player.item_in_hand is None


def test_use_tool_breaks_block_and_leaves_drops():
    session = _flat_session()
    world = session.world
    target = world.location(0, 1, 1)
    sand = Block(Material.SAND)
    sand.set_drops(Material.SAND, 1)
    world.place_block(target, sand)
    _hold(session, Material.IRON_PICKAXE)
    session.execute("useItem 1")
    assert world.block_at(target) is None
    assert world.items_at(target) == ItemStack(Material.SAND, 1)
    assert world.heights.get(0, 1) == 0


def test_bedrock_survives_any_hit():
    session = _flat_session()
    world = session.world
    session.orientate_player(0, -1, 0)
    _hold(session, Material.IRON_SWORD)
    session.use_item(5)
    assert world.block_at(world.location(0, 0, 0)).material is Material.BEDROCK


def test_killed_animal_leaves_beef():
    session = _flat_session()
    world = session.world
    target = world.location(0, 1, 1)
    world.place_creature(Creature(CreatureKind.ANIMAL, target, 1.0))
    _hold(session, Material.WOOD_SWORD)
    session.use_item(1)
    assert world.creature_at(target) is None
    assert world.items_at(target) == ItemStack(Material.BEEF, 1)


def test_surviving_monster_hits_back():
    session = _flat_session()
    world = session.world
    target = world.location(0, 1, 1)
    monster = Creature(CreatureKind.MONSTER, target)
    world.place_creature(monster)
    _hold(session, Material.IRON_SWORD)
    session.use_item(1)
    assert monster.health == pytest.approx(config.MAX_HEALTH - Material.IRON_SWORD.strength)
    assert world.creature_at(target) is monster
    assert session.player.health == pytest.approx(config.MAX_HEALTH - 0.5)

    session.use_item(9)
    assert world.creature_at(target) is None
    assert world.items_at(target) is None


def test_eating_restores_food_then_health():
    session = _flat_session()
    player = session.player
    player.food_level = 10.0
    _hold(session, Material.APPLE, 3)
    session.use_item(2)
    assert player.food_level == pytest.approx(18.0)
    assert player.item_in_hand == ItemStack(Material.APPLE, 1)

    player.damage(5.0)
    session.use_item(4)
    assert player.food_level == pytest.approx(config.MAX_FOODLEVEL)
    assert player.health == pytest.approx(config.MAX_HEALTH - 5.0 + 2.0)
    assert player.item_in_hand is None


def test_use_needs_positive_times():
    session = _flat_session()
    with pytest.raises(ValueError):
        session.use_item(0)
    assert session.use_item(1) is None


def test_play_rejects_bad_world_line():
    for lines in ([], ["1 abc"], ["1 0 Nowhere"], ["x 10 Name"]):
        session = GameSession()
        assert session.play(lines) == []
        assert session.world is None
        assert len(session.errors) == 1
        assert session.errors[0].startswith("expected a first line 'seed size name'")
