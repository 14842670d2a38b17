"""
Tests for decision report formatters.
"""

import json
import pytest
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from models.clause import EvaluationRequest
from models.reports import ReportFormat
from services.penalty import evaluate
from services.reports import (
    JSONFormatter,
    MarkdownFormatter,
    build_report,
    get_formatter,
    get_formatter_by_name,
    write_output,
)
from utils.jinja_filters import format_currency, format_date, format_percent

from conftest import FIXED_NOW, make_request


@pytest.fixture
def basic_report(basic_params, fixed_clock):
    request = make_request(100, 4)
    decision = evaluate(basic_params, request, clock=fixed_clock)
    return build_report(
        basic_params, request, decision,
        template_source="data/template-basic.json",
        request_source="data/request-basic.json",
        generated_at=FIXED_NOW,
    )


@pytest.fixture
def force_majeure_report(force_majeure_params, fixed_clock):
    request = make_request(1000, 30)
    decision = evaluate(force_majeure_params, request, clock=fixed_clock)
    return build_report(force_majeure_params, request, decision, generated_at=FIXED_NOW)


# JSON

def test_json_formatter_outputs_decision(basic_report):
    output = json.loads(JSONFormatter().format(basic_report, {}))

    assert Decimal(output["penaltyAmount"]) == Decimal("21")
    assert Decimal(output["appliedPercent"]) == Decimal("21")
    assert output["buyerMayTerminate"] is False
    assert output["periods"] == 2
    assert output["fractionalUnit"] == "days"
    assert output["evaluatedAt"].startswith("2025-01-15T12:00:00")


def test_json_formatter_writes_decimals_as_strings(basic_report):
    output = json.loads(JSONFormatter().format(basic_report, {"include_inputs": True}))

    assert output["response"]["penaltyAmount"] == "21.0"
    assert output["response"]["delayHours"] == "96"
    assert output["generatedAt"].startswith("2025-01-15T12:00:00")


def test_json_formatter_includes_inputs(basic_report):
    output = json.loads(
        JSONFormatter().format(basic_report, {"include_inputs": True})
    )

    assert output["template"]["capPercentage"] == "55"
    assert output["template"]["penaltyDuration"] == {"amount": 2, "unit": "days"}
    assert output["request"]["goodsValue"] == "100"
    assert "agreedDelivery" not in output["request"]
    assert output["response"]["periods"] == 2


def test_json_formatter_compact(basic_report):
    output = JSONFormatter().format(basic_report, {"pretty_print": False})
    assert b"\n" not in output


# Markdown

def test_markdown_formatter_renders_summary(basic_report):
    text = MarkdownFormatter().format(basic_report, {}).decode("utf-8")

    assert text.startswith("# Late Delivery and Penalty Decision")
    assert "data/template-basic.json" in text
    assert "| Penalty rate | 10.5% of goods value per 2 days |" in text
    assert "| Penalty cap | 55% |" in text
    assert "| Delay | 4 days |" in text
    assert "| Complete penalty periods | 2 |" in text
    assert "**$21.00**" in text
    assert "| **Buyer may terminate** | **No** |" in text


def test_markdown_formatter_force_majeure(force_majeure_report):
    text = MarkdownFormatter().format(force_majeure_report, {}).decode("utf-8")

    assert "Force majeure is in effect" in text
    assert "**$0.00**" in text


def test_markdown_formatter_options(basic_report):
    text = MarkdownFormatter().format(
        basic_report, {"title": "Shipment 42", "currency_symbol": "€"}
    ).decode("utf-8")

    assert text.startswith("# Shipment 42")
    assert "**€21.00**" in text


def test_markdown_formatter_capped(basic_params):
    request = make_request(100, 20)
    report = build_report(
        basic_params, request, evaluate(basic_params, request), generated_at=FIXED_NOW
    )

    text = MarkdownFormatter().format(report, {}).decode("utf-8")

    assert "| Penalty before cap | 105% |" in text
    assert "| Penalty applied | 55% (capped) |" in text
    assert "| **Buyer may terminate** | **Yes** |" in text


def test_markdown_formatter_shows_timestamps_in_utc(basic_params):
    request = EvaluationRequest.from_payload({
        "goodsValue": 100,
        "agreedDelivery": "2025-03-01T12:00:00+05:00",
        "deliveredAt": "2025-03-05T07:00:00Z",
    })
    report = build_report(
        basic_params, request, evaluate(basic_params, request), generated_at=FIXED_NOW
    )

    text = MarkdownFormatter().format(report, {}).decode("utf-8")

    assert "| Agreed delivery | 2025-03-01 07:00 UTC |" in text
    assert "| Delivered at | 2025-03-05 07:00 UTC |" in text
    assert "| Complete penalty periods | 2 |" in text


# PDF

def test_pdf_html_renders_decision(basic_params):
    request = make_request(100, 20)
    report = build_report(
        basic_params, request, evaluate(basic_params, request), generated_at=FIXED_NOW
    )

    html = get_formatter(ReportFormat.PDF).render_html(report, {})

    assert "<h1>Late Delivery and Penalty Decision</h1>" in html
    assert "<th>Penalty amount</th><td>$55.00</td>" in html
    assert "<th>Buyer may terminate</th><td>Yes</td>" in html
    assert "<th>Termination after</th><td>15 days</td>" in html
    assert "55% (capped)" in html
    assert "Force majeure is in effect" not in html


def test_pdf_html_renders_force_majeure(force_majeure_report):
    html = get_formatter(ReportFormat.PDF).render_html(
        force_majeure_report, {"footer_text": "Shipment 42"}
    )

    assert "Force majeure is in effect" in html
    assert "<th>Penalty amount</th><td>$0.00</td>" in html
    assert "<footer>Shipment 42</footer>" in html


def test_pdf_formatter_outputs_pdf(basic_report):
    formatter = get_formatter(ReportFormat.PDF)

    output = formatter.format(basic_report, {})

    assert output.startswith(b"%PDF")
    assert formatter.get_filename("decision") == "decision.pdf"


# Registry

def test_get_formatter():
    assert isinstance(get_formatter(ReportFormat.JSON), JSONFormatter)
    assert isinstance(get_formatter(ReportFormat.MARKDOWN), MarkdownFormatter)


@pytest.mark.parametrize("name", ["markdown", "MD", "md"])
def test_get_formatter_by_name_markdown(name):
    formatter = get_formatter_by_name(name)
    assert formatter.get_filename("decision") == "decision.md"


def test_get_formatter_by_name_unknown():
    with pytest.raises(ValueError) as exc_info:
        get_formatter_by_name("docx")

    assert "Unknown file format" in str(exc_info.value)


def test_write_output_creates_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "response.json"

    size = write_output(path, b'{"ok": true}')

    assert path.read_bytes() == b'{"ok": true}'
    assert size == 12


# Filters

@pytest.mark.parametrize("value,expected", [
    (Decimal("21.0"), "$21.00"),
    (Decimal("6.9993"), "$7.00"),
    (Decimal("0.005"), "$0.01"),
    (1234567.5, "$1,234,567.50"),
    (None, "-"),
])
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize("value,expected", [
    (Decimal("21.0"), "21%"),
    (Decimal("10.5"), "10.5%"),
    (Decimal("0"), "0%"),
    (Decimal("100"), "100%"),
])
def test_format_percent(value, expected):
    assert format_percent(value) == expected


@pytest.mark.parametrize("value,expected", [
    (datetime(2025, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=5))), "2025-03-01 07:00 UTC"),
    (datetime(2025, 3, 1, 23, 30, tzinfo=timezone(timedelta(hours=-2))), "2025-03-02 01:30 UTC"),
    (datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc), "2025-03-01 12:00 UTC"),
    (date(2025, 3, 1), "2025-03-01 00:00 UTC"),
    (None, "-"),
])
def test_format_date(value, expected):
    assert format_date(value) == expected
