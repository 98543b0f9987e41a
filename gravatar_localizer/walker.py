import os

from gravatar_localizer.errors import DirectoryReadError
from gravatar_localizer.rewriter import rewrite_file


def list_dir(dirname: str) -> list[os.DirEntry]:
    try:
        with os.scandir(dirname) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError as e:
        raise DirectoryReadError(f"ReadDir failed: {e}") from e


def walk(dirname: str, cache) -> int:
    """Rewrite every .html file under dirname; returns how many were changed."""
    rewritten = 0

    for entry in list_dir(dirname):
        full_name = os.path.join(dirname, entry.name)

        # Symlinked directories are not followed.
        if entry.is_dir(follow_symlinks=False):
            rewritten += walk(full_name, cache)
        elif entry.name.endswith(".html"):
            try:
                if rewrite_file(full_name, cache):
                    print(f"✓ Rewrote {full_name}")
                    rewritten += 1
            except OSError as e:
                print(f"✗ Failed to process {full_name}: {e}")

    return rewritten
