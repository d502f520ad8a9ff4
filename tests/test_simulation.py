import io
import re
import time

from dinephilo.config import SimulationConfig
from dinephilo.simulation import Philosopher, Simulation, current_time_ms


def make(num=3, die=1000, eat=5, sleep=5):
    out = io.StringIO()
    return Simulation(SimulationConfig(num, die, eat, sleep), out), out


def test_current_time_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    now = current_time_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_philosophers_are_seated_around_the_table():
    sim, _ = make(num=4)
    assert [p.id for p in sim.philosophers] == [1, 2, 3, 4]
    assert [(p.left_fork, p.right_fork) for p in sim.philosophers] == [(0, 1), (1, 2), (2, 3), (3, 0)]
    assert all(p.last_meal == sim.start_time for p in sim.philosophers)
    assert len(sim.forks) == 4


def test_not_finished_at_start():
    sim, _ = make()
    assert sim.is_finished() is False
    assert sim.elapsed_ms() >= 0


def test_announce_format():
    sim, out = make()
    sim.announce(sim.philosophers[1], "is eating ...")
    match = re.fullmatch(r"(\d+) philo 2 is eating \.\.\.\n", out.getvalue())
    assert match is not None
    stamp = int(match.group(1))
    assert 0 <= stamp <= sim.elapsed_ms()


def test_acquire_and_release_forks():
    sim, out = make()
    philosopher = sim.philosophers[0]
    sim.acquire_forks(philosopher)
    assert philosopher.can_eat is True
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert all(re.fullmatch(r"\d+ philo 1 has taken a fork", line) for line in lines)
    assert sim.forks[0].locked() and sim.forks[1].locked()
    sim.release_forks(philosopher)
    assert philosopher.can_eat is False
    assert not sim.forks[0].locked() and not sim.forks[1].locked()


def test_eat_updates_meal_and_releases():
    sim, out = make(eat=1)
    philosopher = sim.philosophers[1]
    philosopher.last_meal = 0
    sim.acquire_forks(philosopher)
    sim.eat(philosopher)
    assert philosopher.meals_eaten == 1
    assert philosopher.last_meal >= sim.start_time
    assert philosopher.can_eat is False
    assert "philo 2 is eating ..." in out.getvalue()
    assert not any(fork.locked() for fork in sim.forks)


def test_has_died():
    sim, _ = make(die=100)
    philosopher = sim.philosophers[0]
    assert sim.has_died(philosopher) is False
    philosopher.last_meal = current_time_ms() - 500
    assert sim.has_died(philosopher) is True


def test_monitor_announces_death_and_finishes():
    sim, out = make(die=50)
    sim.philosophers[2].last_meal = 0
    sim.monitor()
    assert sim.is_finished() is True
    assert re.fullmatch(r"\d+ philo 3 died\n", out.getvalue())


def test_no_forks_taken_after_finish():
    sim, out = make(die=50)
    sim.philosophers[0].last_meal = 0
    sim.monitor()
    before = out.getvalue()
    philosopher = sim.philosophers[1]
    sim.acquire_forks(philosopher)
    assert philosopher.can_eat is False
    assert out.getvalue() == before


def test_run_philosopher_returns_when_finished():
    sim, out = make(die=50)
    sim.philosophers[0].last_meal = 0
    sim.monitor()
    before = out.getvalue()
    sim.run_philosopher(sim.philosophers[1])
    assert out.getvalue() == before


def test_single_philosopher_dies():
    sim, out = make(num=1, die=20, eat=5, sleep=5)
    sim.run()
    text = out.getvalue()
    assert sim.is_finished() is True
    assert re.search(r"^\d+  philo 1 has started$", text, re.M)
    assert text.rstrip("\n").splitlines()[-1].endswith("philo 1 died")
    assert not sim.forks[0].locked()


def test_run_ends_with_one_death():
    sim, out = make(num=2, die=10, eat=40, sleep=5)
    sim.run()
    died = [line for line in out.getvalue().splitlines() if line.endswith("died")]
    assert len(died) == 1
    assert not any(fork.locked() for fork in sim.forks)


def test_philosopher_dataclass_defaults():
    philosopher = Philosopher(id=7, left_fork=6, right_fork=0, last_meal=0)
    assert philosopher.meals_eaten == 0
    assert philosopher.can_eat is False