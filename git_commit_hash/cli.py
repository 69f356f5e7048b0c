import sys

from git_commit_hash.git import GitError, get_commit_hash
from git_commit_hash.options import InvalidOption, parse_options
from git_commit_hash.output import write_source
from git_commit_hash.render import render

EXIT_INVALID_OPTION = -1
EXIT_WRITE_FAILED = -3


def print_error(message):
    if sys.stdout.isatty():
        print(f'\033[1;31merror:\033[m {message}')
    else:
        print(f'error: {message}')


def run(options):
    try:
        commit = get_commit_hash(options.hash_type, options.git_dir)
    except GitError as e:
        print_error(e)
        return e.exit_code

    try:
        path = write_source(options.output, render(options, commit))
    except OSError as e:
        print_error(e)
        return EXIT_WRITE_FAILED

    if path is not None:
        print(f'Wrote commit {commit} to {path}')
    return 0


def main(argv=None):
    try:
        options = parse_options(sys.argv[1:] if argv is None else argv)
    except InvalidOption as e:
        print_error(e)
        return EXIT_INVALID_OPTION
    return run(options)
