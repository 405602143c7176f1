"""Interactive library command.

Wires the starter titles and the console streams into a Library. Prompts read
from stdin, so the command can also be driven from a pipe.
"""
from datetime import datetime

from tddintro.library import Library, Application
from tddintro.utils.config import load_settings
from tddintro.core import (
    ConsoleLogger,
    StreamOutputSink,
    StreamInputSource,
    SystemTimeProvider,
)


def setup_parser(parser):
    """Setup argument parser for library command"""
    parser.add_argument(
        '--config',
        help='YAML settings file with starter titles and time format'
    )
    parser.add_argument(
        '--add',
        action='store_true',
        help='Prompt for a title to add before listing'
    )
    parser.add_argument(
        '--remove',
        action='store_true',
        help='Prompt for a title to remove before listing'
    )
    parser.add_argument(
        '--no-welcome',
        action='store_true',
        help='Skip the welcome banner'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show debug output'
    )


def execute(args, time_provider=None):
    """Execute library command"""
    settings = load_settings(args.config)
    time_provider = time_provider if time_provider is not None else SystemTimeProvider()

    library = Library(
        books=settings.books,
        output=StreamOutputSink(),
        input_source=StreamInputSource(),
        logger=ConsoleLogger(verbose=args.verbose),
        time_format=settings.time_format
    )

    if not args.no_welcome:
        library.welcome(datetime.fromtimestamp(time_provider.current_time()))
    if args.add:
        library.enter_book()
    if args.remove:
        library.remove_book()

    Application(library).start()
    return 0
