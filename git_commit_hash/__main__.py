import sys

from git_commit_hash.cli import main

sys.exit(main())
