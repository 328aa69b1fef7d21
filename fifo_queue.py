from collections import deque

from errors import InternalConsistencyError


class FIFOQueue:
    """Resident (frame, page) pairs in load order, oldest at the head.

    Only loads append to the queue. Hits never reorder it, which is what
    separates FIFO replacement from LRU.
    """

    def __init__(self):
        self.entries = deque()

    def push_tail(self, frame, page):
        for queued_frame, queued_page in self.entries:
            if queued_frame == frame or queued_page == page:
                raise InternalConsistencyError(
                    f"Frame {frame} or page {page} already queued as "
                    f"({queued_frame}, {queued_page})")
        self.entries.append((frame, page))

    def pop_head(self):
        if not self.entries:
            raise InternalConsistencyError(
                "FIFO queue is empty while no free frames remain")
        return self.entries.popleft()

    def remove_page(self, page):
        for index, (frame, queued_page) in enumerate(self.entries):
            if queued_page == page:
                del self.entries[index]
                return frame
        return None

    def snapshot(self):
        return list(self.entries)

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(list(self.entries))

    def __contains__(self, page):
        return any(queued_page == page for _, queued_page in self.entries)
