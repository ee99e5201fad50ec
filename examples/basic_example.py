# examples/basic_example.py
"""
Basic example of using patternbook to run design pattern demos from Python
"""

from patternbook import CatalogConfig, DemoRunner, PatternCategory, default_registry
from patternbook.creational.builder import HawaiianPizzaBuilder
from patternbook.structural.decorator import CarModel1, Navigation, PremiumSoundSystem


def list_catalogue():
    """Show what is registered, family by family."""
    print("=== Catalogue ===")
    for category, infos in default_registry.by_category().items():
        print(f"{category.value}: {', '.join(info.key for info in infos)}")


def run_a_few_demos():
    """Run demos by key, with banners between them."""
    print("\n=== Selected demos ===")
    runner = DemoRunner()
    runner.run_many(["builder", "facade", "strategy"])
    print(f"\nCompleted: {runner.completed}")


def run_one_family():
    """Run every behavioral demo with a fixed seed so the games replay the same."""
    print("\n=== Behavioral family ===")
    runner = DemoRunner(CatalogConfig(seed=2024))
    runner.run_all(PatternCategory.BEHAVIORAL)


def use_the_classes_directly():
    """The pattern classes are plain Python and can be used without the runner."""
    print("\n=== Using the classes directly ===")
    pizza = HawaiianPizzaBuilder().create_pizza()
    pizza.print()

    car = PremiumSoundSystem(Navigation(CarModel1()))
    print(f"{car.get_description()} costs {car.get_cost():g}")


if __name__ == "__main__":
    list_catalogue()
    run_a_few_demos()
    run_one_family()
    use_the_classes_directly()
