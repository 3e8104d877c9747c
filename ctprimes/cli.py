"""
Command line front end.

Usage:
    ctprimes count 100
    ctprimes below 1000 --width uint16 --format c --output primes.h
    ctprimes count 10000 --config config/default.yaml
    ctprimes verify --count 10000
"""

import argparse
import sys
import time

import yaml

from . import primes, primes_less_than
from .errors import PrimesError
from .output import FORMATS, is_c_identifier, render, write_table
from .verify import verify_count

DEFAULTS = {
    'width': 'int64',
    'format': 'text',
    'name': 'PRIMES',
}


def load_config(path) -> dict:
    """Merge a YAML config file over DEFAULTS. path=None gives DEFAULTS."""
    config = dict(DEFAULTS)
    if path is None:
        return config
    with open(path) as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(loaded).__name__}")
    unknown = set(loaded) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"{path}: unknown keys {sorted(unknown)}")
    config.update(loaded)
    if config['format'] not in FORMATS:
        raise ValueError(f"{path}: format {config['format']!r} not one of {list(FORMATS)}")
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ctprimes',
        description='Generate ordered prime tables with a Sieve of Eratosthenes')
    parser.add_argument('--config', type=str, default=None,
                        help='YAML file with defaults for width/format/name')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print progress to stderr')
    sub = parser.add_subparsers(dest='command', required=True)

    for command, metavar, help_text in (
            ('count', 'N', 'First N primes'),
            ('below', 'M', 'All primes strictly less than M')):
        p = sub.add_parser(command, help=help_text)
        p.add_argument('value', type=int, metavar=metavar)
        p.add_argument('--width', type=str, default=None,
                       help='numpy integer dtype of the elements (e.g. uint16)')
        p.add_argument('--format', choices=FORMATS, default=None,
                       help='Output format')
        p.add_argument('--name', type=str, default=None,
                       help='Array name for the C header format')
        p.add_argument('-o', '--output', type=str, default=None,
                       help='Write to file instead of stdout')

    p = sub.add_parser('verify', help='Cross-check count mode, ceiling mode and trial division')
    p.add_argument('--count', type=int, action='append', default=None,
                   help='Prime count to verify (repeatable)')
    return parser


def resolve_options(args, config: dict):
    """Flags over config. Returns (width, format, name)."""
    width = args.width or config['width']
    fmt = args.format or config['format']
    name = args.name or config['name']
    if fmt == 'c' and not (isinstance(name, str) and is_c_identifier(name)):
        raise ValueError(f"name {name!r} is not a valid C identifier")
    return width, fmt, name


def run_table(args, width, fmt: str, name: str) -> int:
    t0 = time.time()
    if args.command == 'count':
        table = primes(args.value, width)
    else:
        table = primes_less_than(args.value, width)
    if args.verbose:
        print(f"{len(table):,} primes ({table.dtype}) in {time.time() - t0:.3f}s",
              file=sys.stderr)

    if args.output:
        write_table(table, fmt, args.output, name)
        if args.verbose:
            print(f"Wrote {args.output}", file=sys.stderr)
    elif fmt == 'npy':
        print("error: npy format needs --output", file=sys.stderr)
        return 2
    else:
        sys.stdout.write(render(table, fmt, name))
    return 0


def run_verify(args) -> int:
    counts = args.count or [10, 1000, 10000]
    ok = True
    for n in counts:
        ok = verify_count(n, verbose=True)['ok'] and ok
    return 0 if ok else 1


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != 'verify':
        try:
            options = resolve_options(args, load_config(args.config))
        except (OSError, yaml.YAMLError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

    try:
        if args.command == 'verify':
            return run_verify(args)
        return run_table(args, *options)
    except PrimesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
