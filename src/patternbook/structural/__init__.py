"""
Structural patterns: adapter, bridge, composite, decorator, facade, flyweight,
plus the per-class object counter idiom.
"""

from .adapter import HinduAdapter, HinduFemale, HinduRitual, MuslimFemale
from .bridge import CircleShape, DrawingAPI1, DrawingAPI2
from .composite import CompositeGraphic, Ellipse
from .decorator import (
    CarModel1,
    Navigation,
    PremiumSoundSystem,
    ManualTransmission,
    Core,
    MessengerWithSalutation,
    MessengerWithValediction,
)
from .facade import HouseFacade
from .flyweight import FlyweightCharacter, FlyweightCharacterFactory
from .object_counter import ObjectCounter

__all__ = [
    "HinduAdapter",
    "HinduFemale",
    "HinduRitual",
    "MuslimFemale",
    "CircleShape",
    "DrawingAPI1",
    "DrawingAPI2",
    "CompositeGraphic",
    "Ellipse",
    "CarModel1",
    "Navigation",
    "PremiumSoundSystem",
    "ManualTransmission",
    "Core",
    "MessengerWithSalutation",
    "MessengerWithValediction",
    "HouseFacade",
    "FlyweightCharacter",
    "FlyweightCharacterFactory",
    "ObjectCounter",
]
