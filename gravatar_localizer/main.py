import os
import sys

from gravatar_localizer import downloader
from gravatar_localizer.cache import GravatarCache
from gravatar_localizer.errors import LocalizerError
from gravatar_localizer.walker import walk

WORK_DIR = "./work/"
OUT_DIR = "./gravatar/"


def run(work_dir: str = WORK_DIR, out_dir: str = OUT_DIR, fetch=downloader.fetch) -> int:
    os.makedirs(out_dir, exist_ok=True)

    cache = GravatarCache(out_dir, fetch=fetch)
    rewritten = walk(work_dir, cache)

    print(f"\nDone! Rewrote {rewritten} files, cached {len(cache)} avatars in {out_dir}")
    return rewritten


def main():
    try:
        run()
    except LocalizerError as e:
        print(f"✗ {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
