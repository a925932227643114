#!/usr/bin/env python3
"""
Demo: Check the category laws for the example morphisms and print the report.
"""

from morphisms.examples import add_one, double, subtract_three
from morphisms.laws import DEFAULT_DOMAIN, verify_category_laws
from morphisms.serialization import law_report_to_yaml


def print_report(report):
    """Pretty-print a LawReport."""
    print()
    print("=" * 70)
    print("CATEGORY LAW REPORT")
    print("=" * 70)
    print()

    for result in report.results:
        status = "OK  " if result.holds else "FAIL"
        print(f"  [{status}] {result.law:<28} {result.subject or '':<36} ({result.samples_checked} samples)")
    print()

    if report.warnings:
        print("WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("All laws hold on the sample domain.")
    print()


def main():
    report = verify_category_laws(add_one, double, subtract_three, domain=DEFAULT_DOMAIN)

    print_report(report)

    print("YAML:")
    print(law_report_to_yaml(report))


if __name__ == "__main__":
    main()
