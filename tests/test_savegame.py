import json

import pytest

from bravoengine.savegame import (
    SaveArray,
    SaveGame,
    SaveGameManager,
    is_float,
    is_integer,
)


@pytest.mark.parametrize("text,expected", [("42", True), ("-7", True), ("+3", True), ("4.2", False), ("", False), ("abc", False)])
def test_is_integer(text, expected):
    assert is_integer(text) is expected


@pytest.mark.parametrize("text,expected", [("4.2", True), ("-0.5", True), ("10", True), (".5", True), ("1e3", True), ("x1", False), ("", False), ("1.2.3", False)])
def test_is_float(text, expected):
    assert is_float(text) is expected


def test_fields_add_get_set(tmp_path):
    game = SaveGame(tmp_path / "save.json")
    game.add_int_field("level", 3)
    game.add_float_field("health", 0.75)
    game.add_string_field("player", "hero")
    assert game.has_int_field("level")
    assert not game.has_float_field("level")
    assert game.get_int_field("level").value == 3
    game.set_int_field("level", 4)
    game.set_float_field("health", 0.5)
    game.set_string_field("player", "villain")
    assert game.get_int_field("level").value == 4
    assert game.get_float_field("health").value == 0.5
    assert game.get_string_field("player").value == "villain"


def test_missing_fields_raise(tmp_path):
    game = SaveGame(tmp_path / "save.json")
    with pytest.raises(KeyError):
        game.get_int_field("nothing")
    with pytest.raises(KeyError):
        game.set_string_field("nothing", "x")


def test_duplicate_field_raises(tmp_path):
    game = SaveGame(tmp_path / "save.json")
    game.add_int_field("level", 1)
    with pytest.raises(ValueError):
        game.add_int_field("level", 2)


def test_store_and_reload_round_trip(tmp_path):
    path = tmp_path / "save.json"
    game = SaveGame(path)
    game.add_int_field("level", 3)
    game.add_float_field("speed", 2.0)
    game.add_string_field("player", "hero")
    game.add_array("inventory")
    inventory = game.get_array("inventory")
    inventory.add_int_field("coins", 12)
    inventory.add_string_field("weapon", "sword")
    game.set_array("inventory", inventory)
    game.store()

    loaded = SaveGame(path)
    assert loaded.get_int_field("level").value == 3
    assert loaded.get_float_field("speed").value == 2.0
    assert loaded.has_float_field("speed")
    assert loaded.get_string_field("player").value == "hero"
    restored = loaded.get_array("inventory")
    assert restored.get_int_field("coins").value == 12
    assert restored.get_string_field("weapon").value == "sword"


def test_stored_file_is_json_object(tmp_path):
    path = tmp_path / "save.json"
    game = SaveGame(path)
    game.add_int_field("level", 3)
    game.store()
    assert json.loads(path.read_text()) == {"level": 3}


def test_get_array_returns_copy(tmp_path):
    game = SaveGame(tmp_path / "save.json")
    game.add_array("stats")
    copy_of_array = game.get_array("stats")
    copy_of_array.add_int_field("kills", 5)
    assert game.get_array("stats").int_fields == ()


def test_array_errors(tmp_path):
    game = SaveGame(tmp_path / "save.json")
    game.add_array("stats")
    with pytest.raises(ValueError):
        game.add_array("stats")
    with pytest.raises(KeyError):
        game.get_array("other")
    with pytest.raises(KeyError):
        game.set_array("other", SaveArray("other"))


def test_save_array_fields():
    array = SaveArray("stats")
    array.add_int_field("kills", 5)
    array.add_float_field("ratio", 1.5)
    array.add_string_field("rank", "gold")
    assert array.name == "stats"
    array.get_int_field("kills").value = 6
    assert array.get_int_field("kills").value == 6
    assert [f.name for f in array.float_fields] == ["ratio"]
    assert array.get_string_field("rank").value == "gold"
    with pytest.raises(KeyError):
        array.get_float_field("missing")


def test_remove_deletes_file(tmp_path):
    path = tmp_path / "save.json"
    game = SaveGame(path)
    game.store()
    assert path.exists()
    game.remove()
    assert not path.exists()
    game.remove()
    assert not path.exists()


def test_manager_create_get_delete(tmp_path):
    manager = SaveGameManager()
    path = tmp_path / "slot.json"
    created = manager.create_save_game("slot1", path)
    assert manager.get_save_game("slot1") is created
    assert manager.create_save_game("slot1", tmp_path / "other.json") is created
    created.store()
    manager.delete_save_game("slot1", delete_file=True)
    assert not path.exists()
    with pytest.raises(KeyError):
        manager.get_save_game("slot1")


def test_manager_delete_keeps_file_by_default(tmp_path):
    manager = SaveGameManager()
    path = tmp_path / "slot.json"
    manager.create_save_game("slot1", path).store()
    manager.delete_save_game("slot1")
    assert path.exists()
    with pytest.raises(KeyError):
        manager.delete_save_game("slot1")