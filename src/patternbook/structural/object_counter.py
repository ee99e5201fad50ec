# src/patternbook/structural/object_counter.py
"""
Object counter: creation and destruction statistics kept separately for every
class that derives from a common counting base.

Each subclass gets its own counters when it is defined, so counting X objects
never disturbs the count of Y objects.
"""

from ..enums import PatternCategory
from ..registry import register_pattern


class ObjectCounter:
    objects_created = 0
    objects_alive = 0

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.objects_created = 0
        cls.objects_alive = 0

    def __new__(cls, *args, **kwargs):
        # copy, deepcopy and unpickling all construct through here
        instance = super().__new__(cls)
        cls.objects_created += 1
        cls.objects_alive += 1
        return instance

    def __del__(self):
        type(self).objects_alive -= 1


class X(ObjectCounter):
    pass


class Y(ObjectCounter):
    pass


@register_pattern(
    "object_counter", "Object counter", PatternCategory.IDIOM,
    summary="Per-class creation and liveness counts from one base class.",
    reference_url="https://en.wikipedia.org/wiki/Curiously_recurring_template_pattern",
)
def object_counter_demo():
    xs = [X() for _ in range(3)]
    y = Y()
    print(f"X: created {X.objects_created}, alive {X.objects_alive}")
    print(f"Y: created {Y.objects_created}, alive {Y.objects_alive}")
    del xs[0]
    del y
    print(f"X: created {X.objects_created}, alive {X.objects_alive}")
    print(f"Y: created {Y.objects_created}, alive {Y.objects_alive}")
