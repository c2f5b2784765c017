class VisitedTracker:
    """
    Tracks which URLs have been fetched during a crawl.

    Kept separate from CrawlContext so the dedup gate can be tested on its own
    and swapped (e.g. for a lock-guarded set) without touching the traversal.
    Entries are never evicted: an evicted URL could be fetched a second time.
    """

    def __init__(self):
        self._visited: set[str] = set()

    def mark_if_new(self, url: str) -> bool:
        """Insert `url` and return True, or return False if it was already present."""
        if url in self._visited:
            return False
        self._visited.add(url)
        return True

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        return url in self._visited

    def __len__(self) -> int:
        return len(self._visited)

    def __iter__(self):
        return iter(self._visited)
