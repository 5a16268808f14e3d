"""Coupling analysis models.

Defines the per-module Martin metrics record, main-sequence zones, and
Stable Dependencies Principle violations.

An undefined metric is represented as ``None`` (exported as ``UNDEFINED``).
It is a legitimate outcome, not a missing value: an isolated module has
no instability, and a module without declared types has no abstractness.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

UNDEFINED = None

# A metric ratio in [0.0, 1.0], or UNDEFINED
Ratio = Optional[float]


class Zone(Enum):
    """Position of a module relative to the main sequence."""

    NONE = "none"
    PAIN = "pain"  # stable and concrete: rigid, hard to extend
    USELESS = "useless"  # unstable and abstract: abstractions nobody uses


@dataclass(frozen=True)
class ModuleMetrics:
    """Martin package metrics for one module."""

    module: str
    afferent_coupling: int = 0  # Ca: distinct modules depending on this one
    efferent_coupling: int = 0  # Ce: distinct modules this one depends on
    instability: Ratio = UNDEFINED  # Ce / (Ca + Ce)
    abstractness: Ratio = UNDEFINED  # abstract_types / total_types
    main_seq_distance: Ratio = UNDEFINED  # |A + I - 1|
    zone: Zone = Zone.NONE

    @property
    def ca(self) -> int:
        return self.afferent_coupling

    @property
    def ce(self) -> int:
        return self.efferent_coupling

    @property
    def is_isolated(self) -> bool:
        return self.afferent_coupling == 0 and self.efferent_coupling == 0


@dataclass(frozen=True)
class Violation:
    """A dependency from a more stable module onto a less stable one."""

    depender: str
    dependee: str
    delta_i: float  # I(dependee) - I(depender), always > 0

    def is_high_priority(self, threshold: float) -> bool:
        return self.delta_i > threshold
