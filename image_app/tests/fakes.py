"""Test doubles for the clock and the search-page fetcher."""

from typing import List, Optional


class FakeClock:
    """Manually advanced clock; ``sleep`` just moves time forward."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def sleep(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    def __init__(self, html: Optional[str] = None) -> None:
        self.html = html
        self.calls: List[str] = []

    def fetch(self, name: str) -> Optional[str]:
        self.calls.append(name)
        return self.html
