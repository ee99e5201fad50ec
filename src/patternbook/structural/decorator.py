# src/patternbook/structural/decorator.py
"""
Decorator: attach extra responsibilities to an object dynamically, as a
flexible alternative to subclassing. Also known as "wrapper".

Two examples: car options that add to the description and the price, and a
messenger whose output is wrapped with a salutation and/or a valediction.
"""

from abc import ABC, abstractmethod

from ..enums import PatternCategory
from ..registry import register_pattern


class Car(ABC):

    def __init__(self):
        self.description = "Unknown Car"

    def get_description(self) -> str:
        return self.description

    @abstractmethod
    def get_cost(self) -> float:
        ...


class OptionsDecorator(Car):
    """Base for options wrapping another car."""

    name = ""
    price = 0.0

    def __init__(self, car: Car):
        super().__init__()
        self.car = car

    def get_description(self) -> str:
        return f"{self.car.get_description()}, {self.name}"

    def get_cost(self) -> float:
        return self.price + self.car.get_cost()


class CarModel1(Car):

    def __init__(self):
        super().__init__()
        self.description = "CarModel1"

    def get_cost(self) -> float:
        return 31000.23


class Navigation(OptionsDecorator):
    name = "Navigation"
    price = 300.56


class PremiumSoundSystem(OptionsDecorator):
    name = "PremiumSoundSystem"
    price = 0.30


class ManualTransmission(OptionsDecorator):
    name = "ManualTransmission"
    price = 0.30


class Writer(ABC):
    """Messenger interface. Returns the text as written."""

    @abstractmethod
    def write(self, text: str) -> str:
        ...


class Core(Writer):

    def write(self, text: str) -> str:
        return text


class MessengerDecorator(Writer):

    def __init__(self, writer: Writer):
        self.writer = writer

    def write(self, text: str) -> str:
        return self.writer.write(text)


class MessengerWithSalutation(MessengerDecorator):

    def __init__(self, writer: Writer, salutation: str):
        super().__init__(writer)
        self.salutation = salutation

    def write(self, text: str) -> str:
        return super().write(f"{self.salutation}\n{text}")


class MessengerWithValediction(MessengerDecorator):

    def __init__(self, writer: Writer, valediction: str):
        super().__init__(writer)
        self.valediction = valediction

    def write(self, text: str) -> str:
        return f"{super().write(text)}\n{self.valediction}"


@register_pattern(
    "decorator", "Decorator", PatternCategory.STRUCTURAL,
    summary="Stack car options around a base model.",
    reference_url="https://en.wikipedia.org/wiki/Decorator_pattern",
)
def decorator_demo():
    car: Car = CarModel1()
    print(f"Base model of {car.get_description()} costs ${car.get_cost():g}")

    # who wants just a base model, let's add some more features
    car = Navigation(car)
    print(f"{car.get_description()} will cost you ${car.get_cost():g}")
    car = PremiumSoundSystem(car)
    car = ManualTransmission(car)
    print(f"{car.get_description()} will cost you ${car.get_cost():g}")


@register_pattern(
    "messenger_decorator", "Decorator (messenger)", PatternCategory.STRUCTURAL,
    summary="Wrap messages with a salutation and a valediction.",
    reference_url="https://en.wikipedia.org/wiki/Decorator_pattern",
)
def messenger_decorator_demo():
    salutation = "Greetings,"
    valediction = "Sincerly, Andy"

    messengers = [
        (Core(), "This message is not decorated."),
        (MessengerWithSalutation(Core(), salutation),
         "This message is decorated with a salutation."),
        (MessengerWithValediction(Core(), valediction),
         "This message is decorated with a valediction."),
        (MessengerWithValediction(MessengerWithSalutation(Core(), salutation), valediction),
         "This message is decorated with a salutation and a valediction."),
    ]
    for messenger, message in messengers:
        print(messenger.write(message))
        print("-" * 30)
