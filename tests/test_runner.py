# tests/test_runner.py
"""
Tests for DemoRunner: catalogue order, scripted input and profiling.
"""

import logging

import pytest

from patternbook import (
    CatalogConfig, DemoRunner, PatternCategory, PatternRegistry, register_pattern,
)


@pytest.fixture
def toy_registry():
    registry = PatternRegistry()
    calls = []

    @register_pattern("plain", "Plain", PatternCategory.STRUCTURAL, registry=registry)
    def plain_demo():
        calls.append("plain")
        print("plain ran")

    @register_pattern("asks", "Asks", PatternCategory.BEHAVIORAL,
                      interactive=True, registry=registry)
    def asking_demo(read):
        calls.append(read("? "))

    @register_pattern("dice", "Dice", PatternCategory.BEHAVIORAL,
                      uses_random=True, registry=registry)
    def dice_demo(rng):
        calls.append(rng.randint(1, 6))

    return registry, calls


@pytest.mark.unit
class TestDemoRunner:

    def test_defaults(self):
        runner = DemoRunner()
        assert runner.profiler is None
        assert runner.completed == []

    def test_verbose_sets_package_log_level(self):
        DemoRunner(CatalogConfig(verbose=True))
        assert logging.getLogger("patternbook").level == logging.INFO
        DemoRunner(CatalogConfig())
        assert logging.getLogger("patternbook").level == logging.WARNING

    def test_run_single_demo(self, capsys):
        runner = DemoRunner()
        runner.run("strategy")

        assert runner.completed == ["strategy"]
        assert "Called ConcreteStrategyA execute method" in capsys.readouterr().out

    def test_unknown_demo(self):
        with pytest.raises(KeyError):
            DemoRunner().run("no_such_pattern")

    def test_run_many_checks_names_first(self, capsys):
        runner = DemoRunner()
        with pytest.raises(KeyError):
            runner.run_many(["strategy", "no_such_pattern"])

        assert runner.completed == []
        assert capsys.readouterr().out == ""

    def test_run_many_prints_banners(self, capsys):
        DemoRunner().run_many(["command", "facade"])
        out = capsys.readouterr().out

        assert "\n=== Command ===\n" in out
        assert out.index("=== Command ===") < out.index("=== Facade ===")

    def test_run_all_category(self, toy_registry, capsys):
        registry, calls = toy_registry
        runner = DemoRunner(CatalogConfig(seed=1), registry=registry)
        runner.run_all(PatternCategory.STRUCTURAL)

        assert runner.completed == ["plain"]
        assert calls == ["plain"]

    def test_unscripted_interactive_demo_sees_eof(self, toy_registry, capsys):
        registry, _ = toy_registry
        with pytest.raises(EOFError):
            DemoRunner(registry=registry).run("asks")

    def test_seed_makes_runs_repeatable(self, toy_registry, capsys):
        registry, calls = toy_registry
        for _ in range(2):
            runner = DemoRunner(CatalogConfig(seed=42), registry=registry)
            runner.run("dice")
            runner.run("dice")

        assert calls[:2] == calls[2:]

    def test_scripted_memento(self, capsys):
        config = CatalogConfig(memento_inputs=(3, 1, 0))
        DemoRunner(config).run("memento")
        assert " 6  Object: 6  0.06" in capsys.readouterr().out

    def test_scripted_state(self, capsys):
        DemoRunner(CatalogConfig(seed=7)).run("state")
        out = capsys.readouterr().out

        assert "Choice for Rex the Fighter? 2" in out
        assert "Choice for Borg the Fighter? 0" in out

    def test_profiling(self, capsys):
        runner = DemoRunner(CatalogConfig(enable_profiling=True))
        runner.run_many(["bridge", "bridge"])

        assert runner.profiler.demo_stats["bridge"]["count"] == 2
        assert runner.profiler.profile_count == 2


@pytest.mark.integration
class TestFullCatalogue:

    def test_run_everything(self, capsys):
        runner = DemoRunner(CatalogConfig(seed=2024))
        runner.run_all()

        assert runner.completed == runner.registry.keys()
        out = capsys.readouterr().out
        assert out.count("\n=== ") == len(runner.registry)

    def test_same_seed_same_transcript(self, capsys):
        DemoRunner(CatalogConfig(seed=9)).run_all(PatternCategory.BEHAVIORAL)
        first = capsys.readouterr().out
        DemoRunner(CatalogConfig(seed=9)).run_all(PatternCategory.BEHAVIORAL)
        second = capsys.readouterr().out

        assert first == second
