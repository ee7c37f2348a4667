from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterator, List, Sequence


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class StepTiming:
    name: str
    started_at: datetime
    finished_at: datetime
    ok: bool = True

    @property
    def duration_s(self) -> float:
        return (self.finished_at - self.started_at).total_seconds()


class StepTimer:
    """Records how long each named phase of a run took, failed phases included."""

    def __init__(self, *, clock: Clock = utc_now) -> None:
        self._clock = clock
        self.steps: List[StepTiming] = []

    @contextmanager
    def step(self, name: str) -> Iterator[None]:
        started_at = self._clock()
        ok = False
        try:
            yield
            ok = True
        finally:
            self.steps.append(
                StepTiming(
                    name=name,
                    started_at=started_at,
                    finished_at=self._clock(),
                    ok=ok,
                )
            )


def format_steps(steps: Sequence[StepTiming]) -> str:
    parts = [
        f"{s.name}={s.duration_s:.2f}s" + ("" if s.ok else " (failed)")
        for s in steps
    ]
    return ", ".join(parts)
