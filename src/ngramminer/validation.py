# validation.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from . import settings
from .model import RunParameters


@dataclass
class ValidationError(Exception):
    """
    Structured input error. `kind` names the rule that was broken so callers
    (and tests) can tell violations apart without parsing the message.
    """
    kind: str
    message: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)


def collect_violations(params: RunParameters) -> List[ValidationError]:
    """
    Check every rule on the run parameters.

    Returns:
        All violations, in rule order. Empty if the parameters are valid.
    """
    errors: List[ValidationError] = []

    if params.window_size < 1:
        errors.append(ValidationError(
            kind="window_size",
            message="windowSize must be at least 1.",
            details={"window_size": params.window_size},
        ))

    years = (params.from_year, params.to_year)
    if any(y < settings.MIN_YEAR or y > settings.MAX_YEAR for y in years):
        errors.append(ValidationError(
            kind="year_bounds",
            message=f"fromYear and toYear must be between {settings.MIN_YEAR} and {settings.MAX_YEAR}.",
            details={"from_year": params.from_year, "to_year": params.to_year},
        ))

    if params.from_year >= params.to_year:
        errors.append(ValidationError(
            kind="year_order",
            message="fromYear must be less than toYear.",
            details={"from_year": params.from_year, "to_year": params.to_year},
        ))

    if params.from_year + params.window_size > params.to_year:
        errors.append(ValidationError(
            kind="window_fit",
            message=(
                "There are not enough years to shift the window. "
                "Make sure fromYear + windowSize is not greater than toYear."
            ),
            details={
                "from_year": params.from_year,
                "window_size": params.window_size,
                "to_year": params.to_year,
            },
        ))

    p = params.percent_of_years
    # NaN must land outside the range too
    if not (settings.MIN_PERCENT_OF_YEARS <= p <= settings.MAX_PERCENT_OF_YEARS):
        errors.append(ValidationError(
            kind="percent_of_years",
            message=(
                f"percentOfYears must be between {settings.MIN_PERCENT_OF_YEARS} "
                f"and {settings.MAX_PERCENT_OF_YEARS}."
            ),
            details={"percent_of_years": p},
        ))

    return errors


def validate_run_parameters(params: RunParameters) -> None:
    """Raise the first violated rule, if any."""
    errors = collect_violations(params)
    if errors:
        raise errors[0]


def validate_cluster_size(size: int) -> None:
    if size < settings.MIN_CLUSTER_SIZE or size > settings.MAX_CLUSTER_SIZE:
        raise ValidationError(
            kind="cluster_size",
            message=(
                f"The size of the cluster must be between {settings.MIN_CLUSTER_SIZE} "
                f"and {settings.MAX_CLUSTER_SIZE}."
            ),
            details={"cluster_size": size},
        )
