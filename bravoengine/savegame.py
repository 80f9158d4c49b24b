"""Named save games stored as JSON files, with typed fields and arrays."""

from __future__ import annotations

import copy
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_INTEGER = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?")


def is_integer(value: str) -> bool:
    """Return True if the text is a whole decimal number with an optional sign."""
    return _INTEGER.fullmatch(value) is not None


def is_float(value: str) -> bool:
    """Return True if the text is a decimal number, whole numbers included."""
    return _FLOAT.fullmatch(value) is not None


@dataclass
class IntSaveField:
    """A named integer value."""

    name: str
    value: int = 0


@dataclass
class FloatSaveField:
    """A named float value."""

    name: str
    value: float = 0.0


@dataclass
class StringSaveField:
    """A named string value."""

    name: str
    value: str = ""


def _find(fields: list[Any], name: str, kind: str) -> Any:
    for item in fields:
        if item.name == name:
            return item
    raise KeyError(f"{kind} field {name!r} does not exist")


def _check_new(fields: list[Any], name: str, kind: str) -> None:
    if any(item.name == name for item in fields):
        raise ValueError(f"{kind} field {name!r} already exists")


class _FieldStore:
    """Typed field lists shared by save games and save arrays."""

    def __init__(self) -> None:
        self._ints: list[IntSaveField] = []
        self._floats: list[FloatSaveField] = []
        self._strings: list[StringSaveField] = []

    def _add_int(self, name: str, value: int) -> None:
        _check_new(self._ints, name, "int")
        self._ints.append(IntSaveField(name, int(value)))

    def _add_float(self, name: str, value: float) -> None:
        _check_new(self._floats, name, "float")
        self._floats.append(FloatSaveField(name, float(value)))

    def _add_string(self, name: str, value: str) -> None:
        _check_new(self._strings, name, "string")
        self._strings.append(StringSaveField(name, str(value)))

    def _add_any(self, name: str, value: Any) -> None:
        if isinstance(value, bool):
            raise ValueError(f"unsupported value for field {name!r}: {value!r}")
        if isinstance(value, int):
            self._add_int(name, value)
        elif isinstance(value, float):
            self._add_float(name, value)
        elif isinstance(value, str):
            self._add_string(name, value)
        else:
            raise ValueError(f"unsupported value for field {name!r}: {value!r}")

    def _to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for fields in (self._ints, self._floats, self._strings):
            for item in fields:
                data[item.name] = item.value
        return data


class SaveArray(_FieldStore):
    """A named group of typed fields inside a save game."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name

    @property
    def name(self) -> str:
        """Name that identifies the array."""
        return self._name

    @property
    def int_fields(self) -> tuple[IntSaveField, ...]:
        """Integer fields in insertion order."""
        return tuple(self._ints)

    @property
    def float_fields(self) -> tuple[FloatSaveField, ...]:
        """Float fields in insertion order."""
        return tuple(self._floats)

    @property
    def string_fields(self) -> tuple[StringSaveField, ...]:
        """String fields in insertion order."""
        return tuple(self._strings)

    def add_int_field(self, name: str, value: int) -> None:
        """Add an integer field; raises ValueError if the name is taken."""
        self._add_int(name, value)

    def add_float_field(self, name: str, value: float) -> None:
        """Add a float field; raises ValueError if the name is taken."""
        self._add_float(name, value)

    def add_string_field(self, name: str, value: str) -> None:
        """Add a string field; raises ValueError if the name is taken."""
        self._add_string(name, value)

    def get_int_field(self, name: str) -> IntSaveField:
        """Return the integer field; raises KeyError if missing."""
        return _find(self._ints, name, "int")

    def get_float_field(self, name: str) -> FloatSaveField:
        """Return the float field; raises KeyError if missing."""
        return _find(self._floats, name, "float")

    def get_string_field(self, name: str) -> StringSaveField:
        """Return the string field; raises KeyError if missing."""
        return _find(self._strings, name, "string")


class SaveGame(_FieldStore):
    """A save game bound to a JSON file; an existing file is loaded on creation."""

    def __init__(self, file_name: str | Path) -> None:
        super().__init__()
        self._path = Path(file_name)
        self._arrays: list[SaveArray] = []
        if self._path.is_file():
            self._load()

    @property
    def file_name(self) -> Path:
        """Path of the save file."""
        return self._path

    def _load(self) -> None:
        data = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"save file {self._path} does not hold a JSON object")
        for name, value in data.items():
            if isinstance(value, dict):
                array = SaveArray(name)
                for field_name, field_value in value.items():
                    array._add_any(field_name, field_value)
                self._arrays.append(array)
            else:
                self._add_any(name, value)

    def store(self) -> None:
        """Write all fields and arrays to the save file."""
        data = self._to_json()
        for array in self._arrays:
            data[array.name] = array._to_json()
        self._path.write_text(json.dumps(data, indent=4), encoding="utf-8")

    def remove(self) -> None:
        """Delete the save file if it exists."""
        self._path.unlink(missing_ok=True)

    def add_int_field(self, name: str, value: int) -> None:
        """Add an integer field; raises ValueError if the name is taken."""
        self._add_int(name, value)

    def add_float_field(self, name: str, value: float) -> None:
        """Add a float field; raises ValueError if the name is taken."""
        self._add_float(name, value)

    def add_string_field(self, name: str, value: str) -> None:
        """Add a string field; raises ValueError if the name is taken."""
        self._add_string(name, value)

    def set_int_field(self, name: str, value: int) -> None:
        """Change an integer field; raises KeyError if missing."""
        _find(self._ints, name, "int").value = int(value)

    def set_float_field(self, name: str, value: float) -> None:
        """Change a float field; raises KeyError if missing."""
        _find(self._floats, name, "float").value = float(value)

    def set_string_field(self, name: str, value: str) -> None:
        """Change a string field; raises KeyError if missing."""
        _find(self._strings, name, "string").value = str(value)

    def has_int_field(self, name: str) -> bool:
        """Return True if an integer field has this name."""
        return any(item.name == name for item in self._ints)

    def has_float_field(self, name: str) -> bool:
        """Return True if a float field has this name."""
        return any(item.name == name for item in self._floats)

    def has_string_field(self, name: str) -> bool:
        """Return True if a string field has this name."""
        return any(item.name == name for item in self._strings)

    def get_int_field(self, name: str) -> IntSaveField:
        """Return a copy of the integer field; raises KeyError if missing."""
        return copy.copy(_find(self._ints, name, "int"))

    def get_float_field(self, name: str) -> FloatSaveField:
        """Return a copy of the float field; raises KeyError if missing."""
        return copy.copy(_find(self._floats, name, "float"))

    def get_string_field(self, name: str) -> StringSaveField:
        """Return a copy of the string field; raises KeyError if missing."""
        return copy.copy(_find(self._strings, name, "string"))

    def add_array(self, name: str) -> None:
        """Add an empty array; raises ValueError if the name is taken."""
        if any(array.name == name for array in self._arrays):
            raise ValueError(f"array {name!r} already exists")
        self._arrays.append(SaveArray(name))

    def set_array(self, name: str, value: SaveArray) -> None:
        """Replace an array's contents; raises KeyError if missing."""
        for index, array in enumerate(self._arrays):
            if array.name == name:
                replacement = copy.deepcopy(value)
                replacement._name = name
                self._arrays[index] = replacement
                return
        raise KeyError(f"array {name!r} does not exist")

    def get_array(self, name: str) -> SaveArray:
        """Return a copy of an array; raises KeyError if missing."""
        for array in self._arrays:
            if array.name == name:
                return copy.deepcopy(array)
        raise KeyError(f"array {name!r} does not exist")


class SaveGameManager:
    """Keeps save games by identifier."""

    def __init__(self) -> None:
        self._save_games: dict[str, SaveGame] = {}

    def create_save_game(self, save_id: str, path: str | Path) -> SaveGame:
        """Create a save game, or return the existing one with this identifier."""
        if save_id not in self._save_games:
            self._save_games[save_id] = SaveGame(path)
        return self._save_games[save_id]

    def get_save_game(self, save_id: str) -> SaveGame:
        """Return a save game; raises KeyError if it does not exist."""
        try:
            return self._save_games[save_id]
        except KeyError:
            raise KeyError(f"Save game with ID {save_id} does not exist.") from None

    def delete_save_game(self, save_id: str, delete_file: bool = False) -> None:
        """Forget a save game and optionally delete its file; raises KeyError if missing."""
        save_game = self.get_save_game(save_id)
        if delete_file:
            save_game.remove()
        del self._save_games[save_id]