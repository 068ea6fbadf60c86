"""Latest-analysis holder per student.

Each upload begins a new generation. A finished analysis is kept only if
its generation is still the newest one for that student, so a slow,
superseded analysis can never overwrite a newer result. Results are
replaced wholesale, never mutated.
"""

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class AnalysisState(Generic[T]):

    def __init__(self):
        self._lock = threading.Lock()
        self._generations: dict[str, int] = {}
        self._results: dict[str, T] = {}

    def begin(self, student_id: str) -> int:
        """Start a new analysis and return its generation number."""
        with self._lock:
            generation = self._generations.get(student_id, 0) + 1
            self._generations[student_id] = generation
            return generation

    def current_generation(self, student_id: str) -> int:
        with self._lock:
            return self._generations.get(student_id, 0)

    def publish(self, student_id: str, generation: int, result: T) -> bool:
        """Store ``result`` if ``generation`` is still current. Returns whether it was kept."""
        with self._lock:
            if generation != self._generations.get(student_id):
                return False
            self._results[student_id] = result
            return True

    def reset(self, student_id: str) -> None:
        """Drop the stored result, e.g. after a failed extraction."""
        with self._lock:
            self._results.pop(student_id, None)

    def latest(self, student_id: str) -> T | None:
        with self._lock:
            return self._results.get(student_id)
