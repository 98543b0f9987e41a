import os
import re

# The hash is always 32 bytes long; anything after it up to the closing
# quote (size, default image, rating) is dropped.
GRAVATAR_PATTERN = re.compile(rb'"https://www\.gravatar\.com/avatar/(.{32})[^"]*"')
LOCAL_PATH_PREFIX = b"/img/gravatar/"


def local_path(avatar_hash: bytes, ext: str) -> bytes:
    return b'"' + LOCAL_PATH_PREFIX + avatar_hash + ext.encode() + b'"'


def rewrite_file(filename: str, cache) -> bool:
    """Point every gravatar URL in filename at its local copy.

    The file is only written back when at least one URL was found. Read and
    write errors are raised as OSError.
    """
    with open(filename, "rb") as f:
        data = f.read()

    changes = False
    for match in GRAVATAR_PATTERN.finditer(data):
        changes = True
        avatar_hash = match.group(1)
        # fsdecode keeps undecodable bytes, so the saved file name matches the link
        ext = cache.resolve(os.fsdecode(avatar_hash))
        data = data.replace(match.group(0), local_path(avatar_hash, ext))

    if changes:
        with open(filename, "wb") as f:
            f.write(data)

    return changes
