from errors import InternalConsistencyError


class PageTableEntry:
    def __init__(self, page):
        self.page = page
        self.resident = False
        self.frame = None  # None means not in memory

    def is_valid(self):
        return self.resident and self.frame is not None

    def __repr__(self):
        return (f"PageTableEntry(page={self.page}, resident={self.resident}, "
                f"frame={self.frame})")


class PageTable:
    def __init__(self, num_pages):
        self.num_pages = num_pages
        self.entries = [PageTableEntry(i) for i in range(num_pages)]

    def lookup(self, page):
        return self.entries[page]

    def mark_resident(self, page, frame):
        entry = self.entries[page]
        if entry.resident:
            raise InternalConsistencyError(
                f"Page {page} is already resident in frame {entry.frame}")
        entry.resident = True
        entry.frame = frame

    def mark_evicted(self, page):
        entry = self.entries[page]
        if not entry.resident:
            raise InternalConsistencyError(f"Page {page} is not resident")
        entry.resident = False
        entry.frame = None

    def resident_pages(self):
        # (frame, page) pairs, ordered by page id
        return [(entry.frame, entry.page) for entry in self.entries
                if entry.resident]

    def resident_count(self):
        return sum(1 for entry in self.entries if entry.resident)
