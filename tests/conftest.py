"""Test configuration helpers."""

import shutil
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def run_git(repo, *args):
    result = subprocess.run(
        ['git', '-c', 'user.name=Test', '-c', 'user.email=test@example.com', *args],
        cwd=repo,
        check=True,
        stdout=subprocess.PIPE,
        text=True,
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path):
    """A fresh repository with a single empty commit."""
    if shutil.which('git') is None:
        pytest.skip('git is not installed')
    repo = tmp_path / 'repo'
    repo.mkdir()
    run_git(repo, 'init', '--quiet')
    run_git(repo, 'commit', '--quiet', '--allow-empty', '--no-gpg-sign', '-m', 'initial')
    return repo


@pytest.fixture
def head_hash(git_repo):
    return run_git(git_repo, 'rev-parse', 'HEAD')
