import argparse
import re
from collections import namedtuple
from enum import Enum


class AccessModifier(Enum):
    PUBLIC = 'public'
    INTERNAL = 'internal'


class Indenting(Enum):
    SPACES = ' '
    TABS = '\t'


class LineEnding(Enum):
    CRLF = '\r\n'
    LF = '\n'


class HashType(Enum):
    SHORT = 'h'
    LONG = 'H'


Options = namedtuple('Options', [
    'output',
    'namespace',
    'class_name',
    'access_modifier',
    'indenting',
    'indent_size',
    'line_ending',
    'hash_type',
    'git_dir',
], defaults=[
    'GitCommitHash.cs',
    None,
    'GitCommitHash',
    AccessModifier.PUBLIC,
    Indenting.SPACES,
    4,
    LineEnding.LF,
    HashType.SHORT,
    None,
])

NAMESPACE_NAME_REGEX = re.compile(r'[A-Za-z_][A-Za-z0-9_.]*')
CLASS_NAME_REGEX = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


class InvalidOption(Exception):
    pass


def invalid(key, value, valid_values):
    return InvalidOption(f"Invalid '{key}' argument. '{value}' [valid values: {valid_values}]")


def matching(key, regex, valid_values):
    def convert(value):
        if regex.fullmatch(value) is None:
            raise invalid(key, value, valid_values)
        return value
    return convert


def one_of(key, choices, valid_values):
    def convert(value):
        try:
            return choices[value.lower()]
        except KeyError:
            raise invalid(key, value, valid_values) from None
    return convert


def non_negative_int(key):
    def convert(value):
        # int() alone would also take '+4', ' 4' and '4_0'
        if not value.isascii() or not value.isdigit():
            raise invalid(key, value, 'integer greater than or equal to zero')
        return int(value)
    return convert


class Parser(argparse.ArgumentParser):
    def error(self, message):
        raise InvalidOption(message)


class StoreInOrder(argparse.Action):
    """Stores the raw value, keeping track of the order keys were last given in."""

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        given = [dest for dest in getattr(namespace, 'given', []) if dest != self.dest]
        namespace.given = given + [self.dest]


CONVERTERS = {
    'namespace': matching('namespace/ns', NAMESPACE_NAME_REGEX, 'valid C# namespace name'),
    'class_name': matching('class', CLASS_NAME_REGEX, 'valid C# class name'),
    'output': str,
    'hash_type': one_of(
        'hash',
        {'short': HashType.SHORT, 'long': HashType.LONG},
        "'short' or 'long'"),
    'access_modifier': one_of(
        'access-modifier',
        {'public': AccessModifier.PUBLIC, 'internal': AccessModifier.INTERNAL},
        "'public' or 'internal'"),
    'indenting': one_of(
        'indent/indenting',
        {'space': Indenting.SPACES, 'spaces': Indenting.SPACES, 'tab': Indenting.TABS, 'tabs': Indenting.TABS},
        "'space', 'spaces', 'tab' or 'tabs'"),
    'indent_size': non_negative_int('indent-size/indenting-size'),
    'line_ending': one_of(
        'line-ending',
        {'crlf': LineEnding.CRLF, 'lf': LineEnding.LF},
        "'crlf' or 'lf'"),
    'git_dir': str,
}


def make_parser():
    parser = Parser(prog='git-commit-hash', allow_abbrev=False, add_help=False)
    parser.add_argument('--namespace', '--ns', dest='namespace', action=StoreInOrder)
    parser.add_argument('--class', dest='class_name', action=StoreInOrder)
    parser.add_argument('--output', action=StoreInOrder)
    parser.add_argument('--hash', dest='hash_type', action=StoreInOrder)
    parser.add_argument('--access-modifier', action=StoreInOrder)
    parser.add_argument('--indent', '--indenting', dest='indenting', action=StoreInOrder)
    parser.add_argument('--indent-size', '--indenting-size', dest='indent_size', action=StoreInOrder)
    parser.add_argument('--line-ending', action=StoreInOrder)
    parser.add_argument('--git-dir', action=StoreInOrder)
    return parser


def normalize(argv):
    """Rewrites every key/value pair as a single '--key=value' argument.

    Accepts '--key=value', '--key value', '/key=value', '/key value' and
    'key=value'. A key without '=' always takes the next argument as its
    value, even when that argument starts with '-' or '/'.
    """
    args = []
    argv = iter(argv)
    for arg in argv:
        if arg.startswith('--'):
            key = arg[2:]
        elif arg.startswith('/'):
            key = arg[1:]
        elif '=' in arg:
            key = arg
        else:
            args.append(arg)
            continue
        if '=' not in key:
            value = next(argv, None)
            if value is None:
                args.append('--' + key)
                continue
            key += '=' + value
        args.append('--' + key)
    return args


def unknown_key(arg):
    return arg.lstrip('-/').split('=', 1)[0]


def parse_options(argv):
    args, extra = make_parser().parse_known_args(normalize(argv))
    if extra:
        raise InvalidOption(f"Unknown argument '{unknown_key(extra[0])}'.")
    # Only the last value of each key is validated, in command-line order
    return Options(**{dest: CONVERTERS[dest](getattr(args, dest)) for dest in getattr(args, 'given', [])})
