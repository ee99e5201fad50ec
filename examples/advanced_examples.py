# examples/advanced_examples.py
"""
Advanced usage examples for patternbook.
These examples demonstrate custom registries, scripted sessions and profiling.
"""

from patternbook import (
    CatalogConfig, DemoRunner, PatternCategory, PatternRegistry,
    ScriptedInput, register_pattern,
)
from patternbook.behavioral.memento import memento_demo


def custom_registry_example():
    """
    Example: Registering your own demo in a private registry.

    The runner works with any registry, so a course can ship its own exercises
    next to the built-in catalogue without touching it.
    """
    print("\n" + "="*60)
    print("Custom Registry Example")
    print("="*60)

    registry = PatternRegistry()

    @register_pattern(
        "null_object", "Null Object", PatternCategory.BEHAVIORAL,
        summary="A do-nothing collaborator instead of None checks.",
        registry=registry,
    )
    def null_object_demo():
        class NullLogger:
            def log(self, message):
                pass

        logger = NullLogger()
        logger.log("nobody hears this")
        print("Logged through a null object without checking for None")

    runner = DemoRunner(registry=registry)
    runner.run_all()
    print(f"Registered: {registry.keys()}")


def scripted_undo_session():
    """
    Example: Driving the memento menu with a prepared list of answers.

    ScriptedInput echoes each answer after its prompt, so the output reads
    like someone typed it.
    """
    print("\n" + "="*60)
    print("Scripted Undo Session")
    print("="*60)

    # start at 10, double, increase, undo twice, redo once, exit
    memento_demo(ScriptedInput([10, 1, 2, 3, 3, 4, 0]))


def seeded_and_profiled_run():
    """
    Example: Reproducible random demos with per-demo timing.
    """
    print("\n" + "="*60)
    print("Seeded and Profiled Run")
    print("="*60)

    config = CatalogConfig(
        seed=7,                       # same games, same fighters every time
        enable_profiling=True,        # time and RSS growth per demo
        state_inputs=(2, 3),          # Rex jumps, Borg tries to dive while standing
    )
    runner = DemoRunner(config)
    runner.run_many(["state", "template_method", "flyweight"])

    print()
    print(runner.profiler.summary())


if __name__ == "__main__":
    custom_registry_example()
    scripted_undo_session()
    seeded_and_profiled_run()
