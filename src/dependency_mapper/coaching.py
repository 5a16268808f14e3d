"""Prediction comparison for the "predict, then compare" coaching workflow.

A learner guesses instability, abstractness or zone for some modules before
seeing the analysis. This module diffs those guesses against a finished
AnalysisResult. It keeps no state: the conversation lives elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .architecture.analyzer import AnalysisResult
from .architecture.models import UNDEFINED, Ratio, Zone
from .exceptions import UnknownModuleError

DEFAULT_TOLERANCE = 0.1

_NUMERIC_METRICS = ("instability", "abstractness")


@dataclass(frozen=True)
class Prediction:
    """A learner's guess for one module. Unset fields are not scored.

    To predict that a metric is undefined, list it in ``undefined``.
    """

    module: str
    instability: Optional[float] = None
    abstractness: Optional[float] = None
    zone: Optional[Zone] = None
    undefined: frozenset[str] = frozenset()

    def predicted(self, metric: str) -> Union[Ratio, Zone]:
        return getattr(self, metric)

    def is_scored(self, metric: str) -> bool:
        return metric in self.undefined or self.predicted(metric) is not None


@dataclass(frozen=True)
class PredictionOutcome:
    """One predicted metric compared to the computed value."""

    module: str
    metric: str
    predicted: Union[Ratio, Zone]
    actual: Union[Ratio, Zone]
    error: Optional[float]  # absolute error for numeric metrics when both defined
    hit: bool


@dataclass
class PredictionReport:
    outcomes: list[PredictionOutcome] = field(default_factory=list)

    @property
    def hits(self) -> int:
        return sum(1 for o in self.outcomes if o.hit)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def accuracy(self) -> Optional[float]:
        if not self.outcomes:
            return None
        return self.hits / self.total

    def misses(self) -> list[PredictionOutcome]:
        return [o for o in self.outcomes if not o.hit]


def compare_predictions(
    result: AnalysisResult,
    predictions: Iterable[Prediction],
    tolerance: float = DEFAULT_TOLERANCE,
) -> PredictionReport:
    """Score predictions against computed metrics.

    Numeric guesses hit when within ``tolerance`` of the actual value. A
    guess for an undefined metric is a miss unless it also said undefined.

    Raises:
        UnknownModuleError: If a prediction names a module not in the result
    """
    report = PredictionReport()

    for prediction in predictions:
        metrics = result.metrics.get(prediction.module)
        if metrics is None:
            raise UnknownModuleError(prediction.module, sorted(result.metrics))

        for metric in _NUMERIC_METRICS:
            if not prediction.is_scored(metric):
                continue
            actual = getattr(metrics, metric)
            guess = UNDEFINED if metric in prediction.undefined else prediction.predicted(metric)
            report.outcomes.append(_score_ratio(prediction.module, metric, guess, actual, tolerance))

        if prediction.zone is not None:
            report.outcomes.append(
                PredictionOutcome(
                    module=prediction.module,
                    metric="zone",
                    predicted=prediction.zone,
                    actual=metrics.zone,
                    error=None,
                    hit=prediction.zone is metrics.zone,
                )
            )

    return report


def _score_ratio(
    module: str, metric: str, guess: Ratio, actual: Ratio, tolerance: float
) -> PredictionOutcome:
    if guess is UNDEFINED or actual is UNDEFINED:
        return PredictionOutcome(module, metric, guess, actual, None, guess is actual)
    error = abs(guess - actual)
    # float error at the boundary still counts as a hit
    return PredictionOutcome(module, metric, guess, actual, error, error <= tolerance + 1e-9)
