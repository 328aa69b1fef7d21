import pytest

from errors import InternalConsistencyError
from memory_manager import PhysicalMemory, Statistics


def test_frames_are_allocated_in_ascending_order():
    memory = PhysicalMemory(3)
    assert [memory.allocate_free_frame() for _ in range(3)] == [0, 1, 2]
    assert memory.free_frame_count == 0
    assert memory.next_free_frame == 3
    assert not memory.has_free_frame()


def test_allocating_past_capacity_is_an_internal_error():
    memory = PhysicalMemory(1)
    memory.allocate_free_frame()
    with pytest.raises(InternalConsistencyError):
        memory.allocate_free_frame()
    assert memory.free_frame_count == 0


def test_unwritten_frames_are_distinct_from_page_zero():
    memory = PhysicalMemory(2)
    frame = memory.allocate_free_frame()
    memory.set_occupant(frame, 0)
    assert memory.occupant_of(0) == 0
    assert memory.occupant_of(1) is None
    assert memory.occupancy() == [0, None]


def test_set_occupant_overwrites_in_place():
    memory = PhysicalMemory(1)
    memory.set_occupant(memory.allocate_free_frame(), 4)
    memory.set_occupant(0, 7)
    assert memory.occupancy() == [7]
    assert memory.free_frame_count == 0


def test_occupancy_is_a_copy():
    memory = PhysicalMemory(1)
    occupancy = memory.occupancy()
    occupancy[0] = 9
    assert memory.occupant_of(0) is None


def test_statistics():
    stats = Statistics()
    assert stats.fault_rate == 0.0

    for _ in range(4):
        stats.record_reference()
    stats.record_page_fault()
    stats.record_page_fault()
    stats.record_swap()

    assert stats.references == 4
    assert stats.page_faults == 2
    assert stats.swaps == 1
    assert stats.fault_rate == 0.5
    assert str(stats) == "References: 4\nPage Faults: 2\nSwaps: 1"
