import os
import sys
from pathlib import Path

STDOUT = '-'


def resolve_output_path(path):
    return Path(os.path.abspath(os.path.join(os.getcwd(), path)))


def write_source(path, text):
    """Writes text to path byte for byte, creating missing parent directories.

    Returns the absolute path written, or None when path is '-' and the text
    went to standard output.
    """
    data = text.encode('utf-8')
    if str(path) == STDOUT:
        sys.stdout.flush()
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return None

    path = resolve_output_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # No newline translation
    path.write_bytes(data)
    return path
