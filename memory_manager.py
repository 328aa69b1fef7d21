from errors import InternalConsistencyError


class PhysicalMemory:
    def __init__(self, num_frames):
        self.num_frames = num_frames
        # Each frame stores the resident page id, or None if never written
        self.frames = [None] * num_frames
        self.free_frame_count = num_frames
        self.next_free_frame = 0

    def has_free_frame(self):
        return self.free_frame_count > 0

    def allocate_free_frame(self):
        # Frames are handed out once, in ascending order, and never returned
        if self.free_frame_count <= 0:
            raise InternalConsistencyError(
                "No unallocated frames left; eviction must be used")
        frame = self.next_free_frame
        self.next_free_frame += 1
        self.free_frame_count -= 1
        return frame

    def set_occupant(self, frame, page):
        self.frames[frame] = page

    def occupant_of(self, frame):
        return self.frames[frame]

    def occupancy(self):
        return list(self.frames)


class Statistics:
    def __init__(self):
        self.references = 0
        self.page_faults = 0
        self.swaps = 0

    def record_reference(self):
        self.references += 1

    def record_page_fault(self):
        self.page_faults += 1

    def record_swap(self):
        self.swaps += 1

    @property
    def fault_rate(self):
        if self.references == 0:
            return 0.0
        return self.page_faults / self.references

    def __str__(self):
        return (f"References: {self.references}\n"
                f"Page Faults: {self.page_faults}\n"
                f"Swaps: {self.swaps}")
