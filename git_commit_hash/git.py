import re
import subprocess

from git_commit_hash.options import HashType

COMMIT_HASH_REGEX = re.compile(r'[0-9a-f]{4,64}')


class GitError(Exception):
    def __init__(self, message, exit_code):
        super().__init__(message)
        self.exit_code = exit_code


def git_log_command(hash_type, git_dir=None):
    command = ['git']
    if git_dir is not None:
        command.append('--git-dir=' + str(git_dir))
    return command + ['log', '-n', '1', '--pretty=format:%' + hash_type.value]


def get_commit_hash(hash_type=HashType.SHORT, git_dir=None):
    """Returns the abbreviated or full hash of the HEAD commit.

    Raises GitError if git cannot be run, exits with a non-zero code or prints
    something that is not a commit hash.
    """
    try:
        result = subprocess.run(git_log_command(hash_type, git_dir), stdout=subprocess.PIPE)
    except OSError as e:
        raise GitError(f'failed to run git: {e}', -2) from e

    if result.returncode != 0:
        raise GitError(f'git failed and returned exit code {result.returncode}', result.returncode)

    commit = result.stdout.decode('ascii', errors='replace').strip()
    if COMMIT_HASH_REGEX.fullmatch(commit) is None:
        raise GitError(f"git returned '{commit}' which is not a commit hash", -2)
    return commit
