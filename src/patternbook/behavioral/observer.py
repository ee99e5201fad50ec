# src/patternbook/behavioral/observer.py
"""
Observer: a one-to-many dependency, so that when one object changes state
all its dependents are notified and updated automatically.

Observers subscribe to a subject (and may unsubscribe); the subject notifies
them by a method call whenever its data changes.
"""

from abc import ABC, abstractmethod
from typing import List

from ..enums import PatternCategory
from ..registry import register_pattern


class ObserverInterface(ABC):

    @abstractmethod
    def update(self, humidity: float, temperature: float, pressure: float):
        ...

    @abstractmethod
    def show(self):
        ...


class WeatherDataInterface(ABC):

    @abstractmethod
    def register_obj(self, observer: ObserverInterface):
        ...

    @abstractmethod
    def remove_obj(self, observer: ObserverInterface):
        ...

    @abstractmethod
    def notify_obj(self):
        ...


class ParaWeatherData(WeatherDataInterface):
    """Concrete subject."""

    def __init__(self):
        self.humidity = 0.0
        self.temperature = 0.0
        self.pressure = 0.0
        self._observers: List[ObserverInterface] = []

    def sensor_data_change(self, humidity: float, temperature: float, pressure: float):
        self.humidity = humidity
        self.temperature = temperature
        self.pressure = pressure
        self.notify_obj()

    def register_obj(self, observer: ObserverInterface):
        self._observers.append(observer)

    def remove_obj(self, observer: ObserverInterface):
        # unknown observers are ignored
        self._observers = [o for o in self._observers if o is not observer]

    def notify_obj(self):
        for observer in list(self._observers):
            observer.update(self.humidity, self.temperature, self.pressure)
            observer.show()


class CurrentCondition(ObserverInterface):

    def __init__(self, data: ParaWeatherData):
        self.humidity = 0.0
        self.temperature = 0.0
        self.pressure = 0.0
        self.data = data
        data.register_obj(self)

    def show(self):
        print("_____CurrentConditionBoard_____")
        print(f"humidity: {self.humidity:g}")
        print(f"temperature: {self.temperature:g}")
        print(f"pressure: {self.pressure:g}")
        print("_______________________________")

    def update(self, humidity: float, temperature: float, pressure: float):
        self.humidity = humidity
        self.temperature = temperature
        self.pressure = pressure


class Statistic(ObserverInterface):

    def __init__(self, data: ParaWeatherData):
        self.max_temperature = -1000.0
        self.min_temperature = 1000.0
        self.average_temperature = 0.0
        self.count = 0
        self.data = data
        data.register_obj(self)

    def show(self):
        print("________StatisticBoard_________")
        print(f"lowest  temperature: {self.min_temperature:g}")
        print(f"highest temperature: {self.max_temperature:g}")
        print(f"average temperature: {self.average_temperature:g}")
        print("_______________________________")

    def update(self, humidity: float, temperature: float, pressure: float):
        self.count += 1
        self.max_temperature = max(self.max_temperature, temperature)
        self.min_temperature = min(self.min_temperature, temperature)
        self.average_temperature = (
            self.average_temperature * (self.count - 1) + temperature
        ) / self.count


@register_pattern(
    "observer", "Observer", PatternCategory.BEHAVIORAL,
    summary="Weather boards update themselves when the sensor data changes.",
    reference_url="https://en.wikipedia.org/wiki/Observer_pattern",
)
def observer_demo():
    weather_data = ParaWeatherData()
    current = CurrentCondition(weather_data)
    Statistic(weather_data)

    weather_data.sensor_data_change(10.2, 28.2, 1001)
    weather_data.sensor_data_change(12, 30.12, 1003)
    weather_data.sensor_data_change(10.2, 26, 806)
    weather_data.sensor_data_change(10.3, 35.9, 900)

    weather_data.remove_obj(current)
    weather_data.sensor_data_change(100, 40, 1900)
