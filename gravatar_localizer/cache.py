import os

from gravatar_localizer import downloader

AVATAR_URL_TEMPLATE = "https://www.gravatar.com/avatar/{}?s=50&d=identicon&r=pg"


class GravatarCache:
    """Maps avatar hashes to the extension of their downloaded file.

    Each hash is downloaded at most once for the lifetime of the cache.
    """

    def __init__(self, out_dir: str, fetch=downloader.fetch):
        self.out_dir = out_dir
        self.fetch = fetch
        self.extensions: dict[str, str] = {}

    def __len__(self):
        return len(self.extensions)

    def __contains__(self, avatar_hash):
        return avatar_hash in self.extensions

    def resolve(self, avatar_hash: str) -> str:
        if avatar_hash in self.extensions:
            return self.extensions[avatar_hash]

        # Hashes decoded with surrogateescape cannot be printed as is
        printable = avatar_hash.encode("utf-8", "backslashreplace").decode()
        print(f"Downloading: {printable}")
        url = AVATAR_URL_TEMPLATE.format(avatar_hash)
        ext = self.fetch(url, os.path.join(self.out_dir, avatar_hash))

        self.extensions[avatar_hash] = ext
        return ext
