"""
Pytest configuration and shared fixtures.

Provides clause template data matching data/template-basic.json, a fixed
clock for deterministic evaluation times, and the path to the data files.
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from models.clause import ClauseParameters, EvaluationRequest


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
FIXED_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_request(goods_value, amount, unit="days") -> EvaluationRequest:
    """Request with a direct delay duration."""
    return EvaluationRequest.from_payload({
        "goodsValue": goods_value,
        "delay": {"amount": amount, "unit": unit},
    })


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def basic_template_data():
    """10.5% per 2 days, 55% cap, termination after 15 days."""
    return {
        "$class": "io.clause.latedeliveryandpenalty@0.1.0.TemplateModel",
        "forceMajeure": False,
        "penaltyDuration": {
            "$class": "org.accordproject.time@0.3.0.Duration",
            "amount": 2,
            "unit": "days",
        },
        "penaltyPercentage": 10.5,
        "capPercentage": 55,
        "termination": {
            "$class": "org.accordproject.time@0.3.0.Duration",
            "amount": 15,
            "unit": "days",
        },
        "fractionalPart": "days",
        "clauseId": "c88e5ed7-c3e0-4249-a99c-ce9278684ac8",
        "$identifier": "c88e5ed7-c3e0-4249-a99c-ce9278684ac8",
    }


@pytest.fixture
def basic_params(basic_template_data) -> ClauseParameters:
    return ClauseParameters.from_payload(basic_template_data)


@pytest.fixture
def force_majeure_params(basic_template_data) -> ClauseParameters:
    return ClauseParameters.from_payload({**basic_template_data, "forceMajeure": True})
