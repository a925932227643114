"""
Serialization helpers for law reports.

Provides JSON/YAML output via an intermediate dict representation.
Sample values that are not plain data (ints, floats, strings, bools,
None and lists/dicts of those) are stored as their repr, so a report of
arbitrary morphisms can always be written out.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from morphisms.laws import LawReport, LawResult

_PLAIN_TYPES = (int, float, str, bool, type(None))


def _plain(value: Any) -> Any:
    if isinstance(value, _PLAIN_TYPES):
        return value
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    return repr(value)


def law_result_to_dict(r: LawResult) -> Dict[str, Any]:
    return {
        "law": r.law,
        "holds": r.holds,
        "samples_checked": r.samples_checked,
        "subject": r.subject,
        "counterexample": _plain(r.counterexample),
        "expected": _plain(r.expected),
        "actual": _plain(r.actual),
    }


def law_result_from_dict(d: Dict[str, Any]) -> LawResult:
    if not isinstance(d, dict) or "law" not in d:
        raise TypeError(f"Unsupported law result layout: {d!r}")
    return LawResult(
        law=d["law"],
        holds=d.get("holds", True),
        samples_checked=d.get("samples_checked", 0),
        subject=d.get("subject"),
        counterexample=d.get("counterexample"),
        expected=d.get("expected"),
        actual=d.get("actual"),
    )


def law_report_to_dict(report: LawReport) -> Dict[str, Any]:
    return {
        "all_hold": report.all_hold,
        "results": [law_result_to_dict(r) for r in report.results],
        "warnings": list(report.warnings),
    }


def law_report_from_dict(d: Dict[str, Any]) -> LawReport:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported law report layout: {type(d)}")
    report = LawReport()
    report.results = [law_result_from_dict(r) for r in d.get("results", [])]
    report.warnings = list(d.get("warnings", []))
    return report


def law_report_to_json(report: LawReport) -> str:
    return json.dumps(law_report_to_dict(report), sort_keys=True)


def law_report_from_json(s: str) -> LawReport:
    d = json.loads(s)
    return law_report_from_dict(d)


def law_report_to_yaml(report: LawReport) -> str:
    return yaml.safe_dump(law_report_to_dict(report), allow_unicode=True)


def law_report_from_yaml(s: str) -> LawReport:
    d = yaml.safe_load(s)
    return law_report_from_dict(d)
