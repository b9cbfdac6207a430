"""conversion_wiz command line interface."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Callable

from .converter import UnitConverter, load_converter
from .errors import ConversionError

EXIT_PROMPT = "Enter first unit of conversion query or 'exit' to quit:"


def _print_output(payload: dict[str, Any], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, sort_keys=True))
        return

    if "result" in payload:
        print(f"{payload['value']} {payload['from']} = {payload['result']} {payload['to']}")
    if "path" in payload:
        print(f"path: {payload['path']}")
    if "units" in payload:
        print("Units:")
        for index, unit in enumerate(payload["units"], start=1):
            print(f"\t{index}: {unit}")

    errors = payload.get("errors")
    if isinstance(errors, list) and errors:
        print("errors:")
        for item in errors:
            print(f"  - {item.get('code', '<unknown>')}: {item.get('message', '')}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conversion-wiz",
        description="Convert values between configured units.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to unit configuration JSON (default: $CONVERSION_WIZ_CONFIG or bundled table)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument(
        "--one-way",
        action="store_true",
        help="Do not derive inverse conversions from configured ones",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert a single value")
    convert_parser.add_argument("value", type=float, help="Value to convert")
    convert_parser.add_argument("from_unit", metavar="FROM", help="Source unit name or alias")
    convert_parser.add_argument("to_unit", metavar="TO", help="Target unit name or alias")
    convert_parser.add_argument(
        "--show-path", action="store_true", help="Also print the conversion path"
    )
    convert_parser.add_argument("--json", action="store_true", help="Emit JSON output")

    list_parser = subparsers.add_parser("list", help="List configured units")
    list_parser.add_argument(
        "--all", dest="include_intermediate", action="store_true", help="Include intermediate units"
    )
    list_parser.add_argument("--json", action="store_true", help="Emit JSON output")

    subparsers.add_parser("interactive", help="Prompt for conversions until 'exit'")

    return parser


def interactive(
    converter: UnitConverter,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Prompt for unit pairs and values until ``exit`` or end of input."""
    try:
        while True:
            write(EXIT_PROMPT)
            write("or type 'list' to list all units")
            from_unit = read("").strip()
            if from_unit.lower() == "exit":
                return 0
            if from_unit.lower() == "list":
                write("Units:")
                for index, unit in enumerate(converter.units_formatted(), start=1):
                    write(f"\t{index}: {unit}")
                continue
            if not converter.contains_unit(from_unit):
                write("Please enter a valid unit.")
                continue

            write("Enter second unit of conversion query:")
            to_unit = read("").strip()
            if to_unit.lower() == "exit":
                return 0
            if not converter.contains_unit(to_unit):
                write("Please enter a valid unit.")
                continue

            write("Enter value to convert:")
            raw_value = read("").strip()
            if raw_value.lower() == "exit":
                return 0
            try:
                value = float(raw_value)
            except ValueError:
                write("Please enter a valid number.")
                continue

            try:
                result = converter.convert(value, from_unit, to_unit)
            except ConversionError as exc:
                write(f"Error: {exc}")
                continue
            write(f"{value} {from_unit} = {result} {to_unit}")
    except EOFError:
        return 0


def _run(args: argparse.Namespace) -> int:
    converter = load_converter(args.config, bidirectional=False if args.one_way else None)

    if args.command == "convert":
        result = converter.convert(args.value, args.from_unit, args.to_unit)
        payload: dict[str, Any] = {
            "ok": True,
            "value": args.value,
            "from": args.from_unit,
            "to": args.to_unit,
            "result": result,
        }
        if args.show_path:
            payload["path"] = converter.describe(args.from_unit, args.to_unit)
        _print_output(payload, as_json=bool(args.json))
        return 0

    if args.command == "list":
        units = converter.units_formatted(include_intermediate=bool(args.include_intermediate))
        _print_output({"ok": True, "units": units}, as_json=bool(args.json))
        return 0

    if args.command == "interactive":
        return interactive(converter)

    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return _run(args)
    except ConversionError as exc:
        payload = {
            "ok": False,
            "errors": [{"code": exc.error_code, "message": str(exc), "details": exc.details}],
        }
        _print_output(payload, as_json=bool(getattr(args, "json", False)))
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
