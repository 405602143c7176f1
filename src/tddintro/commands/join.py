"""Join strings command"""
from tddintro.string_joiner import StringJoiner
from tddintro.utils.config import load_settings
from tddintro.core import StreamOutputSink


def setup_parser(parser):
    """Setup argument parser for join command"""
    parser.add_argument(
        'strings',
        nargs='*',
        help='Strings to join, in order'
    )
    parser.add_argument(
        '--delimiter', '-d',
        help='Delimiter placed between strings (default: from config, else ", ")'
    )
    parser.add_argument(
        '--config',
        help='YAML settings file'
    )


def execute(args):
    """Execute join command"""
    settings = load_settings(args.config)
    delimiter = args.delimiter if args.delimiter is not None else settings.delimiter

    joiner = StringJoiner(delimiter)
    StreamOutputSink().write_line(joiner.join(args.strings))
    return 0
