# src/patternbook/cli.py
"""
Command-line interface for the patternbook catalogue
"""

import argparse
import logging
import platform
import sys

import psutil

from . import __version__
from .config import CatalogConfig
from .enums import PatternCategory
from .registry import default_registry
from .runner import DemoRunner


def format_bytes(bytes_value):
    """Format bytes to human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if bytes_value < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} PB"


def print_system_info():
    """Print the interpreter and machine the demos run on."""
    print(f"patternbook v{__version__} - System Information")
    print("=" * 50)

    print("\nPython Information:")
    print(f"  Version: {platform.python_version()}")
    print(f"  Implementation: {platform.python_implementation()}")

    print("\nCPU Information:")
    print(f"  Physical cores: {psutil.cpu_count(logical=False)}")
    print(f"  Logical cores: {psutil.cpu_count(logical=True)}")

    vm = psutil.virtual_memory()
    print("\nSystem Memory:")
    print(f"  Total: {format_bytes(vm.total)}")
    print(f"  Available: {format_bytes(vm.available)} ({vm.percent:.1f}% used)")

    rss = psutil.Process().memory_info().rss
    print("\nCatalogue:")
    print(f"  Registered demos: {len(default_registry)}")
    print(f"  Process memory: {format_bytes(rss)}")


def print_catalogue():
    """List the demos grouped by category."""
    for category, infos in default_registry.by_category().items():
        print(f"\n{category.value.capitalize()}:")
        for info in infos:
            flags = []
            if info.interactive:
                flags.append("reads input")
            if info.uses_random:
                flags.append("random")
            suffix = f" [{', '.join(flags)}]" if flags else ""
            print(f"  {info.key:<26}{info.summary}{suffix}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="patternbook",
        description="patternbook: run classic design pattern demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  patternbook                         # Run every demo in order
  patternbook --list                  # Show the catalogue
  patternbook builder observer        # Run two demos
  patternbook --category behavioral   # Run one family
  patternbook memento --interactive   # Drive the undo/redo menu yourself
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'patternbook v{__version__}'
    )

    parser.add_argument(
        'demos',
        nargs='*',
        metavar='DEMO',
        help='Demo keys to run (default: all of them)'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List the available demos and exit'
    )

    parser.add_argument(
        '--category',
        choices=[c.value for c in PatternCategory],
        help='Run only the demos of one category'
    )

    parser.add_argument(
        '--interactive',
        action='store_true',
        help='Read menu choices from stdin instead of the built-in scripts'
    )

    parser.add_argument(
        '--seed',
        type=int,
        help='Seed for demos that use randomness'
    )

    parser.add_argument(
        '--profile',
        action='store_true',
        help='Print time and memory used by each demo'
    )

    parser.add_argument(
        '--info',
        action='store_true',
        help='Show system information and exit'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable diagnostic logging'
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    if args.info:
        print_system_info()
        return 0

    if args.list:
        print_catalogue()
        return 0

    config = CatalogConfig(
        interactive=args.interactive,
        seed=args.seed,
        enable_profiling=args.profile,
        verbose=args.verbose,
    )
    unknown = [name for name in args.demos if name not in default_registry]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)} (see --list)")
    if args.demos and args.category:
        parser.error("give demo names or --category, not both")

    runner = DemoRunner(config)
    if args.demos:
        runner.run_many(args.demos)
    elif args.category:
        runner.run_all(PatternCategory(args.category))
    else:
        runner.run_all()

    if runner.profiler is not None:
        print()
        print(runner.profiler.summary())

    return 0


if __name__ == "__main__":
    sys.exit(main())
