# src/patternbook/creational/prototype.py
"""
Prototype: the kind of object to create is given by a prototypical instance,
which is cloned to produce new objects.

Useful when building an object the normal way is expensive, or when the client
should not hard-wire concrete class names. Here a factory keeps one prototype
per record type and hands out clones.
"""

import copy
from abc import ABC, abstractmethod
from typing import Dict

from ..enums import PatternCategory, RecordType
from ..registry import register_pattern


class Record(ABC):
    """Base prototype."""

    def clone(self) -> "Record":
        return copy.copy(self)

    @abstractmethod
    def describe(self) -> str:
        ...

    def print(self):
        print(self.describe())


class CarRecord(Record):

    def __init__(self, car_name: str, record_id: int):
        self.car_name = car_name
        self.record_id = record_id

    def describe(self) -> str:
        return f"Car Record\nName  : {self.car_name}\nNumber: {self.record_id}\n"


class BikeRecord(Record):

    def __init__(self, bike_name: str, record_id: int):
        self.bike_name = bike_name
        self.record_id = record_id

    def describe(self) -> str:
        return f"Bike Record\nName  : {self.bike_name}\nNumber: {self.record_id}\n"


class PersonRecord(Record):

    def __init__(self, person_name: str, age: int):
        self.person_name = person_name
        self.age = age

    def describe(self) -> str:
        return f"Person Record\nName : {self.person_name}\nAge  : {self.age}\n"


class RecordFactory:
    """Client holding one prototype per record type."""

    def __init__(self):
        self._records: Dict[RecordType, Record] = {
            RecordType.CAR: CarRecord("Ferrari", 5050),
            RecordType.BIKE: BikeRecord("Yamaha", 2525),
            RecordType.PERSON: PersonRecord("Tom", 25),
        }

    def create_record(self, record_type: RecordType) -> Record:
        return self._records[record_type].clone()


# Monsters: clients hold a PrototypeMonster and call clone() without knowing
# which concrete monster they have.

class PrototypeMonster(ABC):

    def __init__(self, name: str = ""):
        self.name = name

    @abstractmethod
    def clone(self) -> "PrototypeMonster":
        ...


class GreenMonster(PrototypeMonster):

    def __init__(self, name: str = "", number_of_arms: int = 0, slime_available: float = 0.0):
        super().__init__(name)
        self.number_of_arms = number_of_arms
        self.slime_available = slime_available

    def clone(self) -> "GreenMonster":
        return copy.deepcopy(self)


class PurpleMonster(PrototypeMonster):

    def __init__(self, name: str = "", intensity_of_bad_breath: int = 0,
                 length_of_whiplike_antenna: float = 0.0):
        super().__init__(name)
        self.intensity_of_bad_breath = intensity_of_bad_breath
        self.length_of_whiplike_antenna = length_of_whiplike_antenna

    def clone(self) -> "PurpleMonster":
        return copy.deepcopy(self)


class BellyMonster(PrototypeMonster):

    def __init__(self, name: str = "", room_available_in_belly: float = 0.0):
        super().__init__(name)
        self.room_available_in_belly = room_available_in_belly

    def clone(self) -> "BellyMonster":
        return copy.deepcopy(self)


def do_some_stuff_with_a_monster(original_monster: PrototypeMonster) -> PrototypeMonster:
    """Clone any monster and rename the copy. The original is left untouched."""
    new_monster = original_monster.clone()
    new_monster.name = "MyOwnMonster"
    return new_monster


@register_pattern(
    "prototype", "Prototype", PatternCategory.CREATIONAL,
    summary="Hand out clones of preloaded record prototypes.",
    reference_url="https://en.wikipedia.org/wiki/Prototype_pattern",
)
def prototype_demo():
    record_factory = RecordFactory()
    for record_type in (RecordType.CAR, RecordType.BIKE, RecordType.PERSON):
        record_factory.create_record(record_type).print()


@register_pattern(
    "monster_prototype", "Prototype (polymorphic clone)", PatternCategory.CREATIONAL,
    summary="Clone monsters through their common base class.",
    reference_url="https://en.wikipedia.org/wiki/Prototype_pattern",
)
def monster_prototype_demo():
    monsters = [
        GreenMonster("Greenie", number_of_arms=4, slime_available=2.5),
        PurpleMonster("Purply", intensity_of_bad_breath=9, length_of_whiplike_antenna=1.2),
        BellyMonster("Belly", room_available_in_belly=12.0),
    ]
    for monster in monsters:
        copy_ = do_some_stuff_with_a_monster(monster)
        print(f"{type(monster).__name__} '{monster.name}' cloned as '{copy_.name}'")
