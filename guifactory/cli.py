"""Command-line interface for guifactory."""

import argparse
import json
import logging
import sys

from guifactory import __version__, __app_name__
from guifactory.core import application, describe_product
from guifactory.widgets import VARIANTS, get_factory


def build_parser():
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Build a family of widgets from a platform-specific factory.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  %(prog)s -p win --paint               Build and paint the Windows widgets
  %(prog)s -p mac --json                Describe the Mac widgets as JSON
  %(prog)s --list-variants              Show the available widget families

variants:
  win   WinButton, WinCheckBox
  mac   MacButton, MacCheckBox""",
    )
    parser.add_argument(
        '--version', action='version',
        version=f'{__app_name__} {__version__}'
    )
    parser.add_argument(
        '--variant', '-p', default=None, metavar='NAME',
        help=f'Widget family to build ({", ".join(VARIANTS)}; '
             f'aliases: windows, macos, darwin)'
    )
    parser.add_argument(
        '--paint', '-P', action='store_true',
        help='Paint each widget after creating it'
    )
    parser.add_argument(
        '--json', dest='json_output', action='store_true',
        help='Output the created widgets as JSON'
    )
    parser.add_argument(
        '--list-variants', '-l', action='store_true',
        help='List the available widget families and exit'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Verbose logging output'
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s',
    )

    if args.list_variants:
        for name in VARIANTS:
            print(name)
        return

    if args.variant is None:
        parser.error("--variant is required unless --list-variants is given")

    try:
        factory = get_factory(args.variant)
        # JSON output must stay parseable, so painting is suppressed there.
        widgets = application(
            factory,
            paint=args.paint and not args.json_output,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json_output:
        _print_json(widgets)
    elif not args.paint:
        _print_table(widgets, factory)


def _print_json(widgets):
    data = [describe_product(w) for w in widgets]
    print(json.dumps(data, indent=2))


def _print_table(widgets, factory):
    print(f"\n  {type(factory).__name__}: {len(widgets)} widget(s)\n")
    print(f"  {'KIND':<10}{'CLASS':<14}LABEL")
    print(f"  {'-' * 8:<10}{'-' * 12:<14}{'-' * 16}")
    for w in widgets:
        print(f"  {w.kind:<10}{type(w).__name__:<14}{w.label}")
    print()
