"""
tddintro - test-driven development warm-up exercises

A string joiner and a small book catalog whose console I/O is injected,
plus a command-line interface that wires them to the real console.
"""
import argparse
import sys

from tddintro.core.exceptions import TddIntroError

__version__ = "1.0.0"


def main(argv=None):
    """Main CLI entry point"""
    from tddintro.commands import join, library

    parser = argparse.ArgumentParser(
        prog='tddintro',
        description='tddintro: TDD warm-up exercises',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  tddintro join A B C                  # A, B, C
  tddintro join -d - A B C             # A-B-C
  tddintro library                     # Welcome banner and book list
  tddintro library --add               # Prompt for a book, then list
  tddintro library --config lib.yaml   # Use custom starter titles
        '''
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Join command
    join_parser = subparsers.add_parser('join', help='Join strings with a delimiter')
    join.setup_parser(join_parser)

    # Library command
    library_parser = subparsers.add_parser('library', help='List, add and remove books')
    library.setup_parser(library_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Dispatch to command handler
    try:
        if args.command == 'join':
            return join.execute(args)
        elif args.command == 'library':
            return library.execute(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130
    except TddIntroError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 1
