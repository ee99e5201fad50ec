# src/patternbook/structural/facade.py
"""
Facade: one higher-level interface over a set of subsystems.

A remote controlled house has buttons for the alarm, the AC and the TV. The
facade turns "leaving" and "coming back" into single calls.
"""

from ..enums import PatternCategory
from ..registry import register_pattern


class Alarm:

    def alarm_on(self):
        print("Alarm is on and house is secured")

    def alarm_off(self):
        print("Alarm is off and you can go into the house")


class Ac:

    def ac_on(self):
        print("Ac is on")

    def ac_off(self):
        print("AC is off")


class Tv:

    def tv_on(self):
        print("TV is on")

    def tv_off(self):
        print("TV is off")


class HouseFacade:

    def __init__(self):
        self.alarm = Alarm()
        self.ac = Ac()
        self.tv = Tv()

    def go_to_work(self):
        self.ac.ac_off()
        self.tv.tv_off()
        self.alarm.alarm_on()

    def come_home(self):
        self.alarm.alarm_off()
        self.ac.ac_on()
        self.tv.tv_on()


@register_pattern(
    "facade", "Facade", PatternCategory.STRUCTURAL,
    summary="Leave and come home with one call each.",
    reference_url="https://en.wikipedia.org/wiki/Facade_pattern",
)
def facade_demo():
    house = HouseFacade()
    house.go_to_work()
    house.come_home()
