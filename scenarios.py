"""
Scenario configuration for the orders load test.

Each scenario pins a request function to a fixed number of virtual users
for a fixed wall-clock duration (the "constant-vus" executor). Defaults
can be overridden from the environment:

    ORDERS_BASE_URL=http://orders:8080
    ORDERS_POST_VUS=4 ORDERS_POST_DURATION=1m
    ORDERS_GET_VUS=20 ORDERS_GET_DURATION=1m30s
"""

import logging
import os
import re
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

BASE_URL = os.getenv("ORDERS_BASE_URL", "http://localhost:8080")

CONSTANT_VUS = "constant-vus"

_DURATION_RE = re.compile(r"(\d+)(h|m|s)")
_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}


def parse_duration(text: str) -> int:
    """Parse a duration such as ``30s``, ``1m30s`` or ``2h`` into seconds.

    A bare integer is taken as seconds.
    """
    value = str(text).strip()
    if value.isdigit():
        return int(value)
    if not value or _DURATION_RE.sub("", value):
        raise ValueError(f"Invalid duration: {text!r}")
    return sum(int(amount) * _UNIT_SECONDS[unit] for amount, unit in _DURATION_RE.findall(value))


@dataclass(frozen=True)
class Scenario:
    name: str
    exec: str
    vus: int
    duration: str
    executor: str = CONSTANT_VUS

    def __post_init__(self):
        if self.vus < 1:
            raise ValueError(f"Scenario {self.name!r} needs at least one VU, got {self.vus}")
        if self.executor != CONSTANT_VUS:
            raise ValueError(f"Unsupported executor for {self.name!r}: {self.executor}")
        # Fail at construction rather than at the first tick
        parse_duration(self.duration)

    @property
    def duration_s(self) -> int:
        return parse_duration(self.duration)


SCENARIOS = {
    "post": Scenario(name="post", exec="create_order", vus=2, duration="30s"),
    "get": Scenario(name="get", exec="get_order", vus=10, duration="30s"),
}


def _env_key(name: str, field: str) -> str:
    return f"ORDERS_{name.upper()}_{field}"


def load_scenarios(environ=None) -> dict[str, Scenario]:
    """Return the default scenarios with environment overrides applied."""
    environ = os.environ if environ is None else environ
    scenarios = {}
    for name, scenario in SCENARIOS.items():
        changes = {}

        vus_key = _env_key(name, "VUS")
        if environ.get(vus_key):
            try:
                changes["vus"] = int(environ[vus_key])
            except ValueError as e:
                raise ValueError(f"{vus_key} must be an integer, got {environ[vus_key]!r}") from e

        duration_key = _env_key(name, "DURATION")
        if environ.get(duration_key):
            try:
                parse_duration(environ[duration_key])
            except ValueError as e:
                raise ValueError(f"{duration_key}: {e}") from e
            changes["duration"] = environ[duration_key]

        if changes:
            logger.debug("Overriding scenario %s with %s", name, changes)
            scenario = replace(scenario, **changes)
        scenarios[name] = scenario
    return scenarios


def total_vus(scenarios) -> int:
    return sum(s.vus for s in scenarios.values())


def max_duration(scenarios) -> int:
    return max((s.duration_s for s in scenarios.values()), default=0)
