"""CLI entry point for the Age Pension calculator."""

from __future__ import annotations

import argparse
import json
import sys
from typing import TextIO

from .cshc import CSHCInput, assess_cshc
from .engine import calculate
from .jobseeker import JobSeekerInput, assess_jobseeker
from .rates import available_effective_dates, get_jobseeker_schedule, get_schedule
from .report import render_cshc_summary, render_jobseeker_summary, render_summary, result_to_json, write_report
from .schema import CalculationInput, ScheduleLookupError, SchemaError, load_input_data, load_schedule
from .validate import validate_input_data, validate_schedule


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Australian Age Pension calculator")
    parser.add_argument("input", help="Path to calculation input JSON file")
    parser.add_argument("-o", "--output", help="Write the result to this path instead of stdout")
    parser.add_argument("--schedule", help="Path to a rate schedule JSON file")
    parser.add_argument(
        "--effective-date",
        help=f"Built-in rates to use (available: {', '.join(available_effective_dates())})",
    )
    parser.add_argument("--validate", action="store_true", help="Validate input only")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of a text summary")
    return parser


def _print_validation(errors: list[str], warnings: list[str], warning_stream: TextIO | None = None) -> None:
    for warning in warnings:
        print(f"WARNING: {warning}", file=warning_stream or sys.stdout)
    for error in errors:
        print(f"ERROR: {error}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        data = load_input_data(args.input)
        schedule = load_schedule(args.schedule) if args.schedule else get_schedule(args.effective_date)
    except (SchemaError, ScheduleLookupError, OSError, json.JSONDecodeError) as exc:
        print(f"Failed to load input: {exc}", file=sys.stderr)
        return 2

    schedule_check = validate_schedule(schedule)
    validation = validate_input_data(data)
    # JSON on stdout must stay parseable.
    warning_stream = sys.stderr if args.json and not args.output else sys.stdout
    _print_validation(
        schedule_check.errors + validation.errors,
        schedule_check.warnings + validation.warnings,
        warning_stream,
    )
    if not (schedule_check.is_valid and validation.is_valid):
        return 1

    if args.validate:
        print("Input is valid.")
        return 0

    try:
        calc_input = CalculationInput.from_dict(data)
        cshc_input = CSHCInput.from_dict(data["cshc"]) if isinstance(data.get("cshc"), dict) else None
        jobseeker_input = JobSeekerInput.from_dict(data["jobseeker"]) if isinstance(data.get("jobseeker"), dict) else None
        jobseeker_schedule = get_jobseeker_schedule(args.effective_date) if jobseeker_input is not None else None
    except (SchemaError, ScheduleLookupError) as exc:
        print(f"Failed to load input: {exc}", file=sys.stderr)
        return 2

    result = calculate(calc_input, schedule)
    cshc_result = assess_cshc(cshc_input, schedule) if cshc_input is not None else None
    jobseeker_result = (
        assess_jobseeker(jobseeker_input, jobseeker_schedule) if jobseeker_input is not None else None
    )

    if args.json:
        content = result_to_json(result, cshc_result, jobseeker_result)
    else:
        sections = [render_summary(calc_input, result, schedule)]
        if cshc_result is not None:
            sections.append(render_cshc_summary(cshc_result))
        if jobseeker_result is not None:
            sections.append(render_jobseeker_summary(jobseeker_result, jobseeker_schedule))
        content = "\n\n".join(sections)

    if args.output:
        write_report(args.output, content + "\n")
        print(f"Wrote result to {args.output}")
    else:
        print(content)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
