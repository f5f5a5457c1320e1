"""CLI entry point for eui64calc.

Subcommands:
    calculate  Derive the EUI-64 interface ID (and address) for one MAC.
    validate   Check a MAC address and prefix without calculating.
    batch      Calculate addresses for every row of a CSV file.
    info       Show the effective configuration.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _load_config(args: argparse.Namespace):
    """Load config, handling errors."""
    from eui64calc.config import load_config

    config_path = getattr(args, "config", None)
    try:
        return load_config(config_path)
    except FileNotFoundError:
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: invalid config file {config_path or 'eui64calc.toml'}: {e}", file=sys.stderr)
        sys.exit(1)


def _render(calculations, output_format: str) -> str:
    from eui64calc.generators.report import GENERATORS

    return GENERATORS[output_format](calculations)


# ---------------------------------------------------------------------------
# Subcommand: calculate
# ---------------------------------------------------------------------------

def cmd_calculate(args: argparse.Namespace) -> int:
    """Validate the inputs, then calculate and print the result."""
    config = _load_config(args)

    from eui64calc.constraints.validators import user_message, validate_inputs
    from eui64calc.derivations.eui64 import DefaultCalculator
    from eui64calc.models.result import Calculation

    prefix = args.prefix
    if prefix is None and not args.no_default_prefix:
        prefix = config.defaults.prefix
    prefix = prefix or ""

    validation = validate_inputs(args.mac, prefix)
    if not validation.is_valid:
        for error in validation.errors:
            print(f"Error: {user_message(error)}", file=sys.stderr)
            print(f"  {error}", file=sys.stderr)
        return 1

    interface_id, full_address, error = DefaultCalculator().calculate_eui64(args.mac, prefix)
    if error is not None:
        print(f"Error: {user_message(error)}", file=sys.stderr)
        print(f"  {error}", file=sys.stderr)
        return 1

    calc = Calculation(
        mac=args.mac.strip(),
        prefix=prefix.strip(),
        interface_id=interface_id,
        full_address=full_address,
    )
    sys.stdout.write(_render([calc], args.format or config.defaults.format))
    return 0


# ---------------------------------------------------------------------------
# Subcommand: validate
# ---------------------------------------------------------------------------

def cmd_validate(args: argparse.Namespace) -> int:
    """Run the validators on a MAC address and optional prefix."""
    from eui64calc.constraints.validators import validate_inputs

    result = validate_inputs(args.mac, args.prefix or "")
    print(result.report())
    return 0 if result.is_valid else 1


# ---------------------------------------------------------------------------
# Subcommand: batch
# ---------------------------------------------------------------------------

def cmd_batch(args: argparse.Namespace) -> int:
    """Calculate addresses for every row of a CSV file."""
    config = _load_config(args)

    from eui64calc.derivations.eui64 import calculate_records
    from eui64calc.sources.parser import parse_csv

    if args.input == "-":
        csv_text = sys.stdin.read()
        source = "<stdin>"
    else:
        try:
            csv_text = Path(args.input).read_text(encoding="utf-8")
        except OSError as e:
            print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
            return 1
        source = args.input

    records = parse_csv(
        csv_text,
        source,
        mac_column=config.batch.mac_column or None,
        prefix_column=config.batch.prefix_column or None,
        name_column=config.batch.name_column or None,
    )
    if not records:
        print(f"Error: no address records found in {source}.", file=sys.stderr)
        return 1

    default_prefix = args.prefix if args.prefix is not None else config.defaults.prefix
    calculations = calculate_records(records, default_prefix=default_prefix)
    output = _render(calculations, args.format or config.defaults.format)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"Wrote {len(calculations)} result(s) to {args.output} ({len(output)} bytes)")
    else:
        sys.stdout.write(output)

    failed = [
        (record, calc) for record, calc in zip(records, calculations) if not calc.ok
    ]
    for record, calc in failed:
        print(
            f"Warning: {record.source}:{record.row_number}: {calc.error_message}",
            file=sys.stderr,
        )
    if failed:
        print(f"{len(failed)} of {len(calculations)} row(s) failed.", file=sys.stderr)
        return 1
    return 0


# ---------------------------------------------------------------------------
# Subcommand: info
# ---------------------------------------------------------------------------

def cmd_info(args: argparse.Namespace) -> int:
    """Show the effective configuration."""
    config = _load_config(args)

    print(f"Config:         {config.path or '(built-in defaults)'}")
    print(f"Default prefix: {config.defaults.prefix or '(none)'}")
    print(f"Output format:  {config.defaults.format}")
    print()
    print("Batch columns:")
    print(f"  mac:    {config.batch.mac_column or '(auto)'}")
    print(f"  prefix: {config.batch.prefix_column or '(auto)'}")
    print(f"  name:   {config.batch.name_column or '(auto)'}")
    return 0


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    from eui64calc.config import OUTPUT_FORMATS

    parser = argparse.ArgumentParser(
        prog="eui64calc",
        description="Derive EUI-64 interface IDs and IPv6 addresses from MAC addresses.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to eui64calc.toml (default: ./eui64calc.toml if present)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # calculate
    calc_parser = subparsers.add_parser("calculate", help="Calculate for one MAC address")
    calc_parser.add_argument("mac", help="MAC address, e.g. 00-14-22-01-23-45")
    calc_parser.add_argument(
        "prefix", nargs="?",
        help="IPv6 prefix of up to 4 hextets, e.g. 2001:db8::",
    )
    calc_parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    calc_parser.add_argument(
        "--no-default-prefix", action="store_true",
        help="Ignore the configured default prefix",
    )

    # validate
    val_parser = subparsers.add_parser("validate", help="Validate a MAC address and prefix")
    val_parser.add_argument("mac", help="MAC address to check")
    val_parser.add_argument("prefix", nargs="?", help="IPv6 prefix to check")

    # batch
    batch_parser = subparsers.add_parser("batch", help="Calculate for every row of a CSV file")
    batch_parser.add_argument("input", help="CSV file with a MAC column ('-' for stdin)")
    batch_parser.add_argument(
        "--prefix",
        help="Prefix for rows that have none (default: configured prefix)",
    )
    batch_parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    batch_parser.add_argument("-o", "--output", help="Write output to this file")

    # info
    subparsers.add_parser("info", help="Show effective configuration")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "calculate": cmd_calculate,
        "validate": cmd_validate,
        "batch": cmd_batch,
        "info": cmd_info,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
