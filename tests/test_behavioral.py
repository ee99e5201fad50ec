# tests/test_behavioral.py
"""
Unit tests for the smaller behavioral patterns.
"""

import random

import pytest

from patternbook.behavioral.chain import SpecialHandler, chain_of_responsibility_demo
from patternbook.behavioral.command import FlipDownCommand, FlipUpCommand, Light, Switch
from patternbook.behavioral.interpreter import (
    Evaluator, Minus, Number, Plus, Variable, interpreter_demo,
)
from patternbook.behavioral.iterator import (
    Aggregate, AggregateSet, IntLinkedList, Money, Name,
    iterator_demo, linked_list_iterator_demo,
)
from patternbook.behavioral.mediator import Colleague, Mediator, mediator_demo
from patternbook.behavioral.memento import (
    CommandHistory, Object, UndoableCommand, memento_demo,
)
from patternbook.behavioral.observer import (
    CurrentCondition, ParaWeatherData, Statistic, observer_demo,
)
from patternbook.behavioral.state import Fighter, choose_action, state_demo
from patternbook.behavioral.strategy import (
    ConcreteStrategyA, ConcreteStrategyB, Context, strategy_demo,
)
from patternbook.behavioral.template_method import Chess, Monopoly, template_method_demo
from patternbook.behavioral.visitor import Car, CarElementDoVisitor, CarElementPrintVisitor
from patternbook.enums import FighterInput
from patternbook.prompts import ScriptedInput


@pytest.mark.behavioral
class TestChainOfResponsibility:

    def test_request_handled_by_first_capable_handler(self, capsys):
        h1 = SpecialHandler(10, 1)
        h1.set_next_handler(SpecialHandler(20, 2)).set_next_handler(SpecialHandler(30, 3))

        assert h1.request(5) == 1
        assert h1.request(18) == 2
        assert h1.request(29) == 3
        assert h1.request(40) is None

    def test_single_handler(self, capsys):
        assert SpecialHandler(10, 7).request(10) is None
        assert "last handler (7)" in capsys.readouterr().out

    def test_demo_output(self, capsys):
        chain_of_responsibility_demo()
        assert capsys.readouterr().out.splitlines() == [
            "Handler 2 handled the request with a limit of 20",
            "Sorry, I am the last handler (3) and I can't handle the request.",
        ]


@pytest.mark.behavioral
class TestCommand:

    def test_switch_drives_light(self, capsys):
        lamp = Light()
        switch = Switch(FlipUpCommand(lamp), FlipDownCommand(lamp))

        switch.flip_up()
        assert lamp.is_on
        switch.flip_down()
        assert not lamp.is_on
        assert capsys.readouterr().out.splitlines() == ["The light is on", "The light is off"]

    def test_commands_are_callable(self):
        lamp = Light()
        FlipUpCommand(lamp)()
        assert lamp.is_on


@pytest.mark.behavioral
class TestMediator:

    def test_sender_does_not_receive_own_message(self, capsys):
        a, b = Colleague("A"), Colleague("B")
        mediator = Mediator()
        mediator.register_colleague(a)
        mediator.register_colleague(b)

        a.send_message(mediator, "hi")
        assert capsys.readouterr().out.splitlines() == ["B received the message from A: hi"]

    def test_unregistered_sender_reaches_everyone(self, capsys):
        mediator = Mediator()
        mediator.register_colleague(Colleague("Frank"))
        mediator.register_colleague(Colleague("Tom"))

        Colleague("Sam").send_message(mediator, "drinks")
        assert len(capsys.readouterr().out.splitlines()) == 2

    def test_demo_output(self, capsys):
        mediator_demo()
        lines = capsys.readouterr().out.splitlines()
        assert lines[:3] == [
            "Sam received the message from Bob: I'm quitting this job!",
            "Frank received the message from Bob: I'm quitting this job!",
            "Tom received the message from Bob: I'm quitting this job!",
        ]
        assert lines[3].startswith("Frank received the message from Sam: Hooray!")
        assert lines[4].startswith("Tom received the message from Sam: Hooray!")


@pytest.mark.behavioral
class TestObserver:

    def test_statistics(self, capsys):
        data = ParaWeatherData()
        stats = Statistic(data)
        for temperature in (28.2, 30.12, 26):
            data.sensor_data_change(10, temperature, 1000)

        assert stats.min_temperature == 26
        assert stats.max_temperature == 30.12
        assert stats.average_temperature == pytest.approx((28.2 + 30.12 + 26) / 3)

    def test_removed_observer_not_updated(self, capsys):
        data = ParaWeatherData()
        current = CurrentCondition(data)
        data.sensor_data_change(1, 2, 3)
        data.remove_obj(current)
        data.sensor_data_change(4, 5, 6)

        assert (current.humidity, current.temperature, current.pressure) == (1, 2, 3)

    def test_demo_output(self, capsys):
        observer_demo()
        out = capsys.readouterr().out
        # four updates with two boards, one update with the statistic only
        assert out.count("_____CurrentConditionBoard_____") == 4
        assert out.count("________StatisticBoard_________") == 5
        assert out.splitlines()[1:4] == ["humidity: 10.2", "temperature: 28.2", "pressure: 1001"]
        assert out.splitlines()[-4:-1] == [
            "lowest  temperature: 26",
            "highest temperature: 40",
            "average temperature: 32.044",
        ]


@pytest.mark.behavioral
class TestStrategy:

    def test_swap_strategy(self, capsys):
        context = Context(ConcreteStrategyA())
        context.execute()
        context.set_strategy(ConcreteStrategyB())
        context.execute()
        assert capsys.readouterr().out.splitlines() == [
            "Called ConcreteStrategyA execute method",
            "Called ConcreteStrategyB execute method",
        ]

    def test_demo_output(self, capsys):
        strategy_demo()
        lines = capsys.readouterr().out.splitlines()
        assert [line[len("Called ConcreteStrategy")] for line in lines] == ["A", "B", "C", "B", "C"]


@pytest.mark.behavioral
class TestTemplateMethod:

    def test_chess_has_two_players(self, rng, capsys):
        chess = Chess(rng)
        winner = chess.play_one_game()

        assert winner in (0, 1)
        assert chess.players_count == 2
        assert chess.moves_count >= Chess.MIN_MOVES

    def test_monopoly_winner_in_range(self, rng, capsys):
        monopoly = Monopoly(rng)
        for players in range(2, 9):
            winner = monopoly.play_one_game(players)
            assert 0 <= winner < players
            assert monopoly.moves_count >= Monopoly.MIN_MOVES

    def test_monopoly_needs_players(self, rng):
        with pytest.raises(ValueError):
            Monopoly(rng).play_one_game(0)

    def test_demo_is_repeatable_with_seed(self, capsys):
        template_method_demo(random.Random(5))
        first = capsys.readouterr().out
        template_method_demo(random.Random(5))
        second = capsys.readouterr().out

        assert first == second
        assert first.count("Chess Player") == 10
        assert first.count("Monopoly player") == 10


@pytest.mark.behavioral
class TestVisitor:

    def test_print_visitor(self, capsys):
        Car().accept(CarElementPrintVisitor())
        assert capsys.readouterr().out.splitlines() == [
            "Visiting car",
            "Visiting front left wheel",
            "Visiting front right wheel",
            "Visiting back left wheel",
            "Visiting back right wheel",
            "Visiting body",
            "Visiting engine",
            "Visited car",
        ]

    def test_do_visitor(self, capsys):
        Car().accept(CarElementDoVisitor())
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == ""
        assert lines[1] == "Starting my car"
        assert "Kicking my back right wheel" in lines
        assert lines[-2:] == ["Starting my engine", "Started car"]


@pytest.mark.behavioral
class TestInterpreter:

    def test_demo_results(self, capsys):
        interpreter_demo()
        assert capsys.readouterr().out.splitlines() == [
            "Interpreter result: -27",
            "Interpreter result: 2",
            "Interpreter result: 21",
        ]

    def test_syntax_tree_shape(self):
        tree = Evaluator("w x z - +").syntax_tree
        assert isinstance(tree, Plus)
        assert isinstance(tree.right, Minus)
        assert repr(tree.left) == "Variable('w')"

    def test_unbound_variable_is_zero(self):
        assert Evaluator("a b +").interpret({"a": Number(4)}) == 4

    def test_variable_bound_to_expression(self):
        variables = {"x": Plus(Number(1), Number(2))}
        assert Variable("x").interpret(variables) == 3

    @pytest.mark.parametrize("sentence", ["", "   ", "a +", "a b", "+ a b"])
    def test_malformed_sentences(self, sentence):
        with pytest.raises(ValueError):
            Evaluator(sentence)


@pytest.mark.behavioral
class TestIterators:

    def test_linked_list_iteration(self):
        numbers = IntLinkedList()
        assert numbers.is_empty()
        for i in range(3):
            numbers.push_back(i)

        assert len(numbers) == 3
        assert list(numbers) == [0, 1, 2]
        assert numbers.pop_front() == 0
        assert list(numbers) == [1, 2]

    def test_pop_front_on_empty_list(self):
        assert IntLinkedList().pop_front() is None

    def test_iterator_writes_through(self):
        numbers = IntLinkedList()
        numbers.push_back(1)
        it = numbers.begin()
        it.value = 5
        assert list(numbers) == [5]

    def test_cannot_move_past_end(self):
        numbers = IntLinkedList()
        numbers.push_back(1)
        it = numbers.begin().advance()

        assert it == numbers.end()
        with pytest.raises(RuntimeError, match="IteratorCannotMoveToNext"):
            it.advance()
        with pytest.raises(RuntimeError):
            it.value

    def test_aggregate_keeps_duplicates(self):
        agg = Aggregate()
        for amount in (100, 100, 10000):
            agg.add(Money(amount))

        it = agg.create_iterator()
        amounts = []
        while not it.is_done():
            amounts.append(it.current().get_money())
            it.next()
        assert amounts == [100, 100, 10000]
        with pytest.raises(IndexError):
            it.current()

    def test_aggregate_set_sorted_and_unique(self):
        names = AggregateSet(key=Name.get_name)
        for name in ("Qmt", "Bmt", "Qmt", "Amt"):
            names.add(Name(name))

        it = names.create_iterator()
        seen = []
        while not it.is_done():
            seen.append(str(it.current()))
            it.next()
        assert seen == ["Amt", "Bmt", "Qmt"]

    def test_linked_list_demo(self, capsys):
        linked_list_iterator_demo()
        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == "List after adding 42: 42 43 44 45 46 47 48 49 50 51"

    def test_iterator_demo(self, capsys):
        iterator_demo()
        lines = capsys.readouterr().out.splitlines()
        assert lines[1:11] == [str(i) for i in range(10)]
        assert lines[12:15] == ["100", "100", "10000"]
        assert lines[16:] == ["Amt", "Bmt", "Cmt", "Qmt"]


@pytest.mark.behavioral
class TestMemento:

    @pytest.fixture
    def setup(self):
        obj = Object(7)
        history = CommandHistory()
        double = UndoableCommand(obj, Object.double_value, history)
        increment = UndoableCommand(obj, Object.increase_by_one, history)
        return obj, history, double, increment

    def test_undo_restores_whole_object(self, setup):
        obj, history, double, _ = setup
        double.execute()
        assert (obj.get_value(), obj.get_name(), obj.get_decimal()) == (14, "Object: 14", 0.14)

        assert history.undo()
        assert (obj.get_value(), obj.get_name(), obj.get_decimal()) == (7, "Object: 7", 0.07)

    def test_redo_reapplies(self, setup):
        obj, history, double, increment = setup
        double.execute()
        increment.execute()
        history.undo()
        history.undo()
        assert obj.get_value() == 7

        assert history.redo()
        assert history.redo()
        assert obj.get_value() == 15
        assert not history.can_redo()

    def test_nothing_to_undo_or_redo(self, setup, capsys):
        _, history, _, _ = setup
        assert not history.undo()
        assert not history.redo()
        assert capsys.readouterr().out.splitlines() == [
            "There is nothing to undo",
            "There is nothing to redo",
        ]

    def test_new_command_discards_redo_tail(self, setup):
        obj, history, double, increment = setup
        double.execute()
        history.undo()
        increment.execute()

        assert obj.get_value() == 8
        assert not history.can_redo()
        assert len(history.commands) == 1

    def test_snapshot_is_independent(self):
        obj = Object(3)
        memento = obj.create_memento()
        obj.double_value()
        assert memento.snapshot().get_value() == 3

    def test_scripted_session(self, capsys):
        memento_demo(ScriptedInput([7, 1, 2, 3, 3, 3, 4, 4, 4, 9, 1, 0]))
        lines = capsys.readouterr().out.splitlines()
        values = [line for line in lines if line.startswith(" ")]

        assert lines[0] == "Memento Test: Please enter an integer: 7"
        assert "There is nothing to undo" in lines
        assert "There is nothing to redo" in lines
        assert "Invalid choice. Please try again: 1" in lines
        assert values == [
            " 14  Object: 14  0.14",
            " 15  Object: 15  0.15",
            " 14  Object: 14  0.14",
            " 7  Object: 7  0.07",
            " 7  Object: 7  0.07",
            " 14  Object: 14  0.14",
            " 15  Object: 15  0.15",
            " 15  Object: 15  0.15",
            " 30  Object: 30  0.3",
        ]

    def test_session_ends_when_input_runs_out(self, capsys):
        memento_demo(ScriptedInput([5, 2]))
        assert " 6  Object: 6  0.06" in capsys.readouterr().out


@pytest.mark.behavioral
class TestState:

    @pytest.fixture
    def fighter(self, rng, capsys):
        fighter = Fighter("Rex", rng)
        fighter.fatigue_level = 4
        return fighter

    def test_starts_standing(self, fighter):
        assert fighter.state_name == "standing"

    def test_jump_then_dive(self, fighter, capsys):
        fighter.handle_input(FighterInput.JUMP)
        assert fighter.state_name == "jumping"
        height = fighter.states["jumping"].jumping_height
        assert 1 <= height <= 5
        fatigue = 5 if height >= 3 else 4
        assert fighter.get_fatigue_level() == fatigue

        fighter.handle_input(FighterInput.DIVE)
        assert fighter.state_name == "diving"
        assert fighter.get_fatigue_level() == fatigue + 2

        fighter.handle_input(FighterInput.STAND_UP)
        assert fighter.state_name == "standing"
        assert fighter.get_fatigue_level() == fatigue + 1

    def test_jump_does_not_fall_through_to_standing_message(self, fighter, capsys):
        fighter.handle_input(FighterInput.JUMP)
        out = capsys.readouterr().out
        assert "Rex jumps into the air." in out
        assert "One cannot do that while standing" not in out

    def test_ducking_recovers(self, fighter, capsys):
        fighter.handle_input(FighterInput.DUCK_DOWN)
        for _ in range(4):
            fighter.handle_input(FighterInput.DUCK_DOWN)

        assert fighter.states["ducking"].charging_time == 5
        assert fighter.get_fatigue_level() == 0
        assert "Rex feels strong!" in capsys.readouterr().out

    def test_dive_while_standing_is_refused(self, fighter, capsys):
        fighter.handle_input(FighterInput.DIVE)
        assert fighter.state_name == "standing"
        assert "One cannot do that while standing." in capsys.readouterr().out

    def test_states_are_per_fighter(self, rng, capsys):
        rex, borg = Fighter("Rex", rng), Fighter("Borg", rng)
        rex.handle_input(FighterInput.DUCK_DOWN)
        assert borg.states["ducking"].charging_time == 0

    def test_unknown_state(self, fighter):
        with pytest.raises(ValueError):
            fighter.change_state("flying")

    def test_choose_action_reprompts(self, fighter, capsys):
        assert choose_action(fighter, ScriptedInput(["x", 7, 0]))
        assert fighter.state_name == "ducking"
        assert not choose_action(fighter, ScriptedInput([]))

    def test_scripted_demo(self, capsys):
        state_demo(ScriptedInput([2, 0]), random.Random(3))
        out = capsys.readouterr().out
        assert out.startswith(
            "Rex the Fighter and Borg the Fighter are currently standing.\n")
        assert "Choice for Rex the Fighter? 2" in out
        assert "Rex the Fighter jumps into the air." in out
        assert "Borg the Fighter ducks down." in out
