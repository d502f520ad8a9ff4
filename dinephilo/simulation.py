"""Dining philosophers: one thread per philosopher, one monitor watching for death."""

import sys
import threading
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO

from dinephilo.config import SimulationConfig
from dinephilo.printf import print_formatted

_START_DELAY = 0.0001
_LOOP_PAUSE = 0.0001
_MONITOR_PAUSE = 0.001
_FORK_POLL = 0.005


def current_time_ms() -> int:
    """Return the wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass
class Philosopher:
    """One philosopher at the table; forks are indices into the fork list."""

    id: int
    left_fork: int
    right_fork: int
    last_meal: int
    meals_eaten: int = 0
    can_eat: bool = False


class Simulation:
    """Shared state of one run: forks, philosophers and the finished flag."""

    def __init__(self, config: SimulationConfig, output: Optional[TextIO] = None) -> None:
        self.config = config
        self._output = output
        self.start_time = current_time_ms()
        self._finished = False
        self._finished_lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._meal_lock = threading.Lock()
        self.forks: List[threading.Lock] = [threading.Lock() for _ in range(config.num_philos)]
        self.philosophers: List[Philosopher] = [
            Philosopher(
                id=index + 1,
                left_fork=index,
                right_fork=(index + 1) % config.num_philos,
                last_meal=self.start_time,
            )
            for index in range(config.num_philos)
        ]

    @property
    def _stream(self) -> TextIO:
        return sys.stdout if self._output is None else self._output

    def elapsed_ms(self) -> int:
        """Milliseconds since the simulation started."""
        return current_time_ms() - self.start_time

    def is_finished(self) -> bool:
        """Whether a philosopher has died."""
        with self._finished_lock:
            return self._finished

    def _emit(self, philosopher: Philosopher, message: str) -> None:
        print_formatted("%d philo %d %s\n", self.elapsed_ms(), philosopher.id, message,
                        stream=self._stream)

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Write a timestamped status line for the philosopher."""
        with self._write_lock:
            self._emit(philosopher, message)

    def _announce_start(self, philosopher: Philosopher) -> None:
        with self._write_lock:
            print_formatted("%d  philo %d has started\n", self.elapsed_ms(), philosopher.id,
                            stream=self._stream)

    def _take_fork(self, index: int) -> bool:
        fork = self.forks[index]
        while not fork.acquire(timeout=_FORK_POLL):
            if self.is_finished():
                return False
        return True

    def acquire_forks(self, philosopher: Philosopher) -> None:
        """Take both forks, right first for even ids and left first for odd ones.

        Waiting for a fork is abandoned once the simulation has finished; any
        fork already held is then put back.
        """
        if self.is_finished():
            return
        if philosopher.id % 2 == 0:
            first, second = philosopher.right_fork, philosopher.left_fork
        else:
            first, second = philosopher.left_fork, philosopher.right_fork
        if not self._take_fork(first):
            return
        self.announce(philosopher, "has taken a fork")
        if not self._take_fork(second):
            self.forks[first].release()
            return
        self.announce(philosopher, "has taken a fork")
        if self.is_finished():
            self.release_forks(philosopher)
            return
        philosopher.can_eat = True

    def release_forks(self, philosopher: Philosopher) -> None:
        """Put both forks back and mark the philosopher as not eating."""
        for index in dict.fromkeys((philosopher.left_fork, philosopher.right_fork)):
            self.forks[index].release()
        philosopher.can_eat = False

    def eat(self, philosopher: Philosopher) -> None:
        """Record the meal, eat for time_to_eat milliseconds, then release the forks."""
        with self._meal_lock:
            philosopher.last_meal = current_time_ms()
        self.announce(philosopher, "is eating ...")
        time.sleep(self.config.time_to_eat / 1000)
        philosopher.meals_eaten += 1
        self.release_forks(philosopher)

    def run_philosopher(self, philosopher: Philosopher) -> None:
        """Loop taking forks and eating until the simulation finishes."""
        if self.is_finished():
            return
        self._announce_start(philosopher)
        if philosopher.id % 2 == 0:
            time.sleep(_START_DELAY)
        while not self.is_finished():
            self.acquire_forks(philosopher)
            if philosopher.can_eat:
                self.eat(philosopher)
            time.sleep(_LOOP_PAUSE)

    def has_died(self, philosopher: Philosopher) -> bool:
        """Whether more than time_to_die milliseconds passed since the last meal."""
        now = current_time_ms()
        with self._meal_lock:
            last_meal = philosopher.last_meal
        return now - last_meal > self.config.time_to_die

    def monitor(self) -> None:
        """Watch every philosopher until one dies, then announce it and finish."""
        while not self.is_finished():
            for philosopher in self.philosophers:
                if self.has_died(philosopher):
                    with self._write_lock:
                        self._emit(philosopher, "died")
                        with self._finished_lock:
                            self._finished = True
                    return
            time.sleep(_MONITOR_PAUSE)

    def run(self) -> None:
        """Start every philosopher, monitor them, and wait for all to stop."""
        threads = [
            threading.Thread(target=self.run_philosopher, args=(philosopher,), daemon=True)
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        self.monitor()
        for thread in threads:
            thread.join()