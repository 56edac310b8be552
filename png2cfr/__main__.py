"""png2cfr — encode an image as a compact palette-machine command string.

Usage: png2cfr <image> [options]

Each pixel is mapped to the nearest of 8 palette colours and the grid is
walked in 8 serpentine traversal orders. Every traversal is compressed by
folding doubled substrings into loop blocks ('[X]' = X twice) and the
shortest result is printed.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, png2cfr looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import os
import sys

from PIL import Image, UnidentifiedImageError

from png2cfr import registry
from png2cfr.core.env import load_settings
from png2cfr.core.report import format_candidate, format_json, format_text
from png2cfr.core.types import PixelGrid, Report
from png2cfr.selector import encode_all, pick_best


class UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage()
        print(f'png2cfr: {message}', file=sys.stderr)
        raise UsageError(message)


def _build_parser() -> _Parser:
    epilog = (
        'Examples:\n'
        '  png2cfr logo.png\n'
        '  png2cfr logo.png --all\n'
        '  png2cfr logo.png --variant rows-ltr --expand\n'
        '  png2cfr logo.png --json --jobs 4\n'
        '\n'
        'Variants:\n' + ''.join(f'  {v.index}  {v.name}\n' for v in registry.all_variants().values()) + '\n'
        'Environment (set in .env or environment):\n'
        '  PNG2CFR_JOBS=N       worker processes (default 1)\n'
        '  PNG2CFR_HIGHLIGHT=N  highlight output past N tokens (default 1000)\n'
        '  NO_COLOR=1           disable highlighting\n'
    )
    parser = _Parser(
        prog='png2cfr',
        usage='png2cfr <image> [options]',
        description='Encode an image as a compact palette-machine command string.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Positional count is checked by hand so a wrong count prints usage instead of failing
    parser.add_argument('image', nargs='*', help='Path to the image (PNG, GIF, JPEG, ...)')
    parser.add_argument('--env-file', metavar='PATH', default=None, help='Path to .env file')
    parser.add_argument('-a', '--all', action='store_true', help='Show every variant, mark the chosen one')
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    parser.add_argument('-v', '--variant', metavar='NAME', help='Only encode this variant (name or index)')
    parser.add_argument('-e', '--expand', action='store_true', help='Print the uncompressed command string')
    parser.add_argument('-n', '--jobs', type=int, default=None, metavar='N', help='Worker processes')
    parser.add_argument('--highlight', type=int, default=None, metavar='N', help='Highlight output past N tokens')
    parser.add_argument('--no-color', action='store_true', help='Never highlight output')
    parser.add_argument('--verbose', action='store_true', help='Print per-variant lengths to stderr')
    return parser


def _load_grid(path: str) -> PixelGrid | None:
    """Decode path into a grid. Prints the error and returns None on failure."""
    if not os.path.isfile(path):
        print(f'Error opening file: {path}: no such file', file=sys.stderr)
        return None
    try:
        with Image.open(path) as image:
            return PixelGrid.from_image(image)
    except UnidentifiedImageError as e:
        print(f'Error decoding image: {e}', file=sys.stderr)
    except OSError as e:
        print(f'Error opening file: {e}', file=sys.stderr)
    return None


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError:
        return

    if len(args.image) != 1:
        parser.print_usage()
        return

    settings = load_settings(env_file=args.env_file)
    if settings.env_path:
        print(f'png2cfr: loaded {settings.env_path}', file=sys.stderr)

    variants = list(registry.all_variants().values())
    if args.variant:
        try:
            variants = [registry.get(args.variant)]
        except KeyError as e:
            print(f'Error: {e.args[0]}', file=sys.stderr)
            return

    path = args.image[0]
    grid = _load_grid(path)
    if grid is None:
        return

    jobs = args.jobs if args.jobs is not None else settings.jobs
    candidates = encode_all(grid, variants, jobs=jobs)

    report = Report(image_path=path, image_width=grid.width, image_height=grid.height)
    for candidate in candidates:
        report.add(candidate)
        if args.verbose:
            print(f'png2cfr: {format_candidate(candidate)}', file=sys.stderr)
    report.best = pick_best(candidates)

    if args.json:
        print(format_json(report, show_all=args.all))
        return

    limit = args.highlight if args.highlight is not None else settings.highlight
    color = settings.color and not args.no_color and sys.stdout.isatty()
    print(format_text(report, show_all=args.all, expanded=args.expand, limit=limit, color=color))


if __name__ == '__main__':
    main()
