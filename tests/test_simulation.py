import io
import re
import time

from philo.config import SimulationConfig
from philo.simulation import Philosopher, Simulation, timestamp

LINE = re.compile(r"^(\d+) (\d+) (.+)$")


def _parse(output):
    lines = output.getvalue().splitlines()
    parsed = []
    for line in lines:
        match = LINE.match(line)
        assert match is not None, line
        parsed.append((int(match.group(1)), int(match.group(2)), match.group(3)))
    return parsed


def test_timestamp_advances_with_time():
    before = timestamp()
    time.sleep(0.02)
    after = timestamp()
    assert after - before >= 19


def test_forks_are_assigned_in_a_ring():
    sim = Simulation(SimulationConfig(4, 100, 10, 10), io.StringIO())
    assert [p.id for p in sim.philosophers] == [0, 1, 2, 3]
    assert [p.left_fork for p in sim.philosophers] == [0, 1, 2, 3]
    assert sim.philosophers[-1].right_fork == 0
    assert len(sim.forks) == 4


def test_single_philosopher_shares_one_fork():
    sim = Simulation(SimulationConfig(1, 100, 10, 10), io.StringIO())
    assert sim.philosophers == [Philosopher(0, 0, 0)]


def test_print_action_format():
    output = io.StringIO()
    sim = Simulation(SimulationConfig(2, 100, 10, 10), output)
    sim.print_action(1, "is thinking")
    [(elapsed, number, action)] = _parse(output)
    assert number == 2
    assert action == "is thinking"
    assert elapsed >= 0


def test_print_action_silent_after_end():
    output = io.StringIO()
    sim = Simulation(SimulationConfig(2, 100, 10, 10), output)
    sim.all_ate = True
    sim.print_action(0, "is eating")
    sim.all_ate = False
    sim.someone_dead = True
    sim.print_action(0, "is eating")
    assert output.getvalue() == ""


def test_precise_sleep_waits_the_duration():
    output = io.StringIO()
    sim = Simulation(SimulationConfig(1, 100, 10, 10), output)
    start = time.monotonic()
    result = sim.precise_sleep(30)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed >= 0.029
    assert sim.someone_dead is False
    assert output.getvalue() == ""


def test_precise_sleep_returns_at_once_after_a_death():
    output = io.StringIO()
    sim = Simulation(SimulationConfig(1, 100, 10, 10), output)
    sim.someone_dead = True
    start = time.monotonic()
    result = sim.precise_sleep(5000)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed < 1.0
    assert sim.someone_dead is True
    assert output.getvalue() == ""


def test_lone_philosopher_dies():
    output = io.StringIO()
    sim = Simulation(SimulationConfig(1, 60, 20, 20), output)
    assert sim.run() == 1
    events = _parse(output)
    assert events[0][1:] == (1, "has taken a fork")
    assert events[-1][1:] == (1, "died")
    assert events[-1][0] > 60
    assert sim.someone_dead is True


def test_everyone_eats_enough():
    output = io.StringIO()
    config = SimulationConfig(4, 1000, 10, 10, must_eat=3)
    sim = Simulation(config, output)
    assert sim.run() is None
    assert sim.all_ate is True
    assert sim.someone_dead is False
    assert all(p.meals_eaten >= 3 for p in sim.philosophers)
    events = _parse(output)
    assert all(action != "died" for _, _, action in events)
    times = [elapsed for elapsed, _, _ in events]
    assert times == sorted(times)
    eaters = {number for _, number, action in events if action == "is eating"}
    assert eaters == {1, 2, 3, 4}