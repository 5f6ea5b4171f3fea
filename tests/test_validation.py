from __future__ import annotations

import pytest

from ngramminer.model import RunParameters
from ngramminer.validation import (
    ValidationError,
    collect_violations,
    validate_cluster_size,
    validate_run_parameters,
)


def make(from_year=1800, to_year=1820, window_size=5, percent_of_years=0.8):
    return RunParameters("eng-all", "eng-all", from_year, to_year, window_size, percent_of_years)


def test_valid_parameters_pass():
    validate_run_parameters(make())
    assert collect_violations(make()) == []


def test_window_may_end_on_last_year():
    validate_run_parameters(make(from_year=1800, to_year=1805, window_size=5))


@pytest.mark.parametrize(
    "overrides, kind",
    [
        ({"window_size": 0}, "window_size"),
        ({"from_year": 1699}, "year_bounds"),
        ({"to_year": 2009}, "year_bounds"),
        ({"from_year": 1900, "to_year": 1890}, "year_order"),
        ({"from_year": 1900, "to_year": 1905, "window_size": 10}, "window_fit"),
        ({"percent_of_years": 0.05}, "percent_of_years"),
        ({"percent_of_years": 1.5}, "percent_of_years"),
        ({"percent_of_years": float("nan")}, "percent_of_years"),
    ],
)
def test_rejected_parameters(overrides, kind):
    with pytest.raises(ValidationError) as info:
        validate_run_parameters(make(**overrides))
    assert info.value.kind == kind
    assert info.value.message


def test_kinds_are_distinct_per_rule():
    kinds = {
        e.kind
        for p in [
            make(window_size=0),
            make(from_year=1699),
            make(from_year=1900, to_year=1890),
            make(from_year=1900, to_year=1905, window_size=10),
            make(percent_of_years=1.5),
        ]
        for e in collect_violations(p)[:1]
    }
    assert kinds == {"window_size", "year_bounds", "year_order", "window_fit", "percent_of_years"}


def test_collect_reports_every_violation():
    errors = collect_violations(make(from_year=2000, to_year=1990, window_size=0, percent_of_years=2.0))
    assert [e.kind for e in errors] == ["window_size", "year_order", "window_fit", "percent_of_years"]


def test_first_violation_is_raised():
    with pytest.raises(ValidationError) as info:
        validate_run_parameters(make(window_size=0, percent_of_years=2.0))
    assert info.value.kind == "window_size"


def test_percent_bounds_are_inclusive():
    validate_run_parameters(make(percent_of_years=0.1))
    validate_run_parameters(make(percent_of_years=1.0))


def test_str_includes_details():
    err = ValidationError(kind="window_size", message="too small", details={"window_size": 0})
    assert str(err) == "window_size: too small\nwindow_size=0"


@pytest.mark.parametrize("size", [1, 10, 20])
def test_cluster_size_ok(size):
    validate_cluster_size(size)


@pytest.mark.parametrize("size", [0, 21, -3])
def test_cluster_size_rejected(size):
    with pytest.raises(ValidationError) as info:
        validate_cluster_size(size)
    assert info.value.kind == "cluster_size"
