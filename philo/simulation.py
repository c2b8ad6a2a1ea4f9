"""Threads that play out the dining philosophers problem."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import TextIO

from philo.config import SimulationConfig

_ODD_START_DELAY = 0.0002
_SLEEP_POLL = 0.0002
_LONE_POLL = 0.00025
_MONITOR_POLL = 0.0005
_FORK_POLL = 0.001


def timestamp() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass
class Philosopher:
    """State of one philosopher; ids and fork indices count from 0."""

    id: int
    left_fork: int
    right_fork: int
    meals_eaten: int = 0
    last_meal: int = 0


class Simulation:
    """Runs the philosophers and a monitor until one dies or all have eaten."""

    def __init__(self, config: SimulationConfig, output: TextIO | None = None):
        self.config = config
        self.output = sys.stdout if output is None else output
        count = config.nb_philo
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [Philosopher(i, i, (i + 1) % count) for i in range(count)]
        self._print_lock = threading.Lock()
        self._data_lock = threading.Lock()
        self.someone_dead = False
        self.all_ate = False
        self.dead_philosopher: int | None = None
        self.start_time = timestamp()

    @property
    def _stopped(self) -> bool:
        return self.someone_dead or self.all_ate

    def run(self) -> int | None:
        """Play the simulation to its end.

        Returns the 1-based number of the philosopher who died, or None when
        every philosopher ate the required number of meals.
        """
        self.start_time = timestamp()
        for philo in self.philosophers:
            philo.last_meal = self.start_time
        threads = [
            threading.Thread(target=self._routine, args=(philo,), daemon=True)
            for philo in self.philosophers
        ]
        for thread in threads:
            thread.start()
        monitor = threading.Thread(target=self._monitor, daemon=True)
        monitor.start()
        monitor.join()
        for thread in threads:
            thread.join()
        return self.dead_philosopher

    def print_action(self, philo_id: int, action: str) -> None:
        """Log an action of philosopher ``philo_id`` while the simulation runs."""
        with self._print_lock:
            if not self._stopped:
                self._write(f"{timestamp() - self.start_time} {philo_id + 1} {action}\n")

    def precise_sleep(self, duration_ms: int) -> None:
        """Sleep for ``duration_ms`` milliseconds, returning early on a death."""
        start = timestamp()
        while not self.someone_dead and timestamp() - start < duration_ms:
            time.sleep(_SLEEP_POLL)

    def _write(self, text: str) -> None:
        self.output.write(text)
        flush = getattr(self.output, "flush", None)
        if flush is not None:
            flush()

    def _take(self, fork: threading.Lock) -> bool:
        """Acquire a fork, giving up once the simulation has stopped."""
        while not fork.acquire(timeout=_FORK_POLL):
            if self._stopped:
                return False
        return True

    def _eat(self, philo: Philosopher) -> None:
        left = self.forks[philo.left_fork]
        if not self._take(left):
            return
        try:
            self.print_action(philo.id, "has taken a fork")
            if philo.left_fork == philo.right_fork:
                while not self.someone_dead:
                    time.sleep(_LONE_POLL)
                return
            right = self.forks[philo.right_fork]
            if not self._take(right):
                return
            try:
                self.print_action(philo.id, "has taken a fork")
                with self._data_lock:
                    self.print_action(philo.id, "is eating")
                    philo.last_meal = timestamp()
                    philo.meals_eaten += 1
                self.precise_sleep(self.config.time_eat)
            finally:
                right.release()
        finally:
            left.release()

    def _routine(self, philo: Philosopher) -> None:
        if philo.id % 2:
            time.sleep(_ODD_START_DELAY)
        while not self._stopped:
            self._eat(philo)
            if self.all_ate:
                break
            self.print_action(philo.id, "is sleeping")
            self.precise_sleep(self.config.time_sleep)
            self.print_action(philo.id, "is thinking")

    def _check_death(self) -> bool:
        for philo in self.philosophers:
            if self.someone_dead:
                break
            with self._data_lock:
                if timestamp() - philo.last_meal > self.config.time_die:
                    self.someone_dead = True
                    self.dead_philosopher = philo.id + 1
                    with self._print_lock:
                        self._write(f"{timestamp() - self.start_time} {philo.id + 1} died\n")
                    return True
        return False

    def _check_all_ate(self) -> bool:
        must_eat = self.config.must_eat
        if must_eat is None:
            return False
        with self._data_lock:
            done = all(p.meals_eaten >= must_eat for p in self.philosophers)
            if done:
                self.all_ate = True
        return done

    def _monitor(self) -> None:
        while not self._stopped:
            if self._check_death() or self._check_all_ate():
                break
            time.sleep(_MONITOR_POLL)