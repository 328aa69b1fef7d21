import argparse
import sys
from collections import namedtuple

from errors import ConfigError, InternalConsistencyError, InvalidPageError
from fifo_queue import FIFOQueue
from memory_manager import PhysicalMemory, Statistics
from page_table import PageTable
from reporting import DEFAULT_SWAP_LOG, ConsoleReporter, SwapLog, format_final_report

HIT = 'HIT'
FAULT_LOAD = 'FAULT_LOAD'
FAULT_EVICT = 'FAULT_EVICT'

StepResult = namedtuple('StepResult', ['kind', 'page', 'frame', 'evicted_page'])
FinalStats = namedtuple(
    'FinalStats', ['total_refs', 'faults', 'swaps', 'frame_occupancy'])
SimulationSnapshot = namedtuple(
    'SimulationSnapshot',
    ['page_table', 'frames', 'fifo_queue', 'free_frame_count',
     'next_free_frame', 'references', 'page_faults', 'swaps'])


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


class VirtualMemorySimulator:

    def __init__(self, num_frames, num_pages, observers=None):
        if not _is_int(num_frames) or num_frames <= 0:
            raise ConfigError(
                f"Number of frames must be a positive integer, got {num_frames!r}")
        if not _is_int(num_pages) or num_pages <= 0:
            raise ConfigError(
                f"Number of pages must be a positive integer, got {num_pages!r}")

        self.num_frames = num_frames
        self.num_pages = num_pages
        self.page_table = PageTable(num_pages)
        self.physical_memory = PhysicalMemory(num_frames)
        self.fifo_queue = FIFOQueue()
        self.stats = Statistics()
        self.observers = list(observers or [])

    def add_observer(self, observer):
        self.observers.append(observer)

    def _emit(self, event, *args):
        for observer in self.observers:
            getattr(observer, event)(*args)

    def validate_page(self, page):
        if not _is_int(page) or page < 0 or page >= self.num_pages:
            raise InvalidPageError(page, self.num_pages)

    def step(self, page):
        # Reject before touching any state so a bad reference is all-or-nothing
        self.validate_page(page)
        self.stats.record_reference()
        step = self.stats.references

        entry = self.page_table.lookup(page)
        if entry.is_valid():
            # FIFO: hits never reorder the queue
            self._emit('on_hit', step, page, entry.frame)
            return StepResult(HIT, page, entry.frame, None)

        return self.handle_page_fault(step, page)

    def handle_page_fault(self, step, page):
        self.stats.record_page_fault()
        self._emit('on_fault', step, page)

        if self.physical_memory.has_free_frame():
            frame = self.physical_memory.allocate_free_frame()
            self.page_table.mark_resident(page, frame)
            self.physical_memory.set_occupant(frame, page)
            self.fifo_queue.push_tail(frame, page)
            self._emit('on_loaded', step, page, frame,
                       self.physical_memory.free_frame_count)
            return StepResult(FAULT_LOAD, page, frame, None)

        victim_frame, victim_page = self.select_victim_fifo()
        self.evict_page(step, victim_frame, victim_page)

        self.physical_memory.set_occupant(victim_frame, page)
        self.page_table.mark_resident(page, victim_frame)
        self.fifo_queue.push_tail(victim_frame, page)
        self._emit('on_evicted_and_loaded', step, victim_page, page,
                   victim_frame)
        return StepResult(FAULT_EVICT, page, victim_frame, victim_page)

    def select_victim_fifo(self):
        # The head is the oldest load; load order is total so there are no ties
        victim_frame, victim_page = self.fifo_queue.pop_head()
        if self.physical_memory.occupant_of(victim_frame) != victim_page:
            raise InternalConsistencyError(
                f"Queue head ({victim_frame}, {victim_page}) does not match "
                f"frame occupant {self.physical_memory.occupant_of(victim_frame)}")
        return victim_frame, victim_page

    def evict_page(self, step, frame, page):
        self.page_table.mark_evicted(page)
        self.stats.record_swap()
        self._emit('on_swap_out', step, page, frame)

    def run(self, references):
        return [self.step(page) for page in references]

    def final_stats(self):
        return FinalStats(
            total_refs=self.stats.references,
            faults=self.stats.page_faults,
            swaps=self.stats.swaps,
            frame_occupancy=self.physical_memory.occupancy())

    def snapshot(self):
        return SimulationSnapshot(
            page_table=tuple((entry.resident, entry.frame)
                             for entry in self.page_table.entries),
            frames=tuple(self.physical_memory.frames),
            fifo_queue=tuple(self.fifo_queue.snapshot()),
            free_frame_count=self.physical_memory.free_frame_count,
            next_free_frame=self.physical_memory.next_free_frame,
            references=self.stats.references,
            page_faults=self.stats.page_faults,
            swaps=self.stats.swaps)

    def check_invariants(self):
        resident = self.page_table.resident_pages()
        free_frames = self.physical_memory.free_frame_count

        if free_frames + len(resident) != self.num_frames:
            raise InternalConsistencyError(
                f"{free_frames} free frames + {len(resident)} resident pages "
                f"!= {self.num_frames} frames")

        if set(self.fifo_queue.snapshot()) != set(resident):
            raise InternalConsistencyError(
                f"FIFO queue {self.fifo_queue.snapshot()} does not match "
                f"resident pages {resident}")

        for frame, page in resident:
            if self.physical_memory.occupant_of(frame) != page:
                raise InternalConsistencyError(
                    f"Frame {frame} holds {self.physical_memory.occupant_of(frame)}"
                    f" but page {page} claims it")

        for frame, page in enumerate(self.physical_memory.frames):
            if frame >= self.physical_memory.next_free_frame:
                if page is not None:
                    raise InternalConsistencyError(
                        f"Unallocated frame {frame} holds page {page}")
                continue
            entry = self.page_table.lookup(page)
            if not entry.is_valid() or entry.frame != frame:
                raise InternalConsistencyError(
                    f"Frame {frame} holds page {page} but the page table has "
                    f"{entry!r}")


def parse_simulation_input(text):
    """Parse ``frames pages length ref ref ...`` as whitespace-separated integers."""
    tokens = text.split()
    try:
        values = [int(token) for token in tokens]
    except ValueError:
        raise ConfigError("Simulation input must contain only integers")

    if len(values) < 3:
        raise ConfigError(
            "Expected number of frames, number of pages and sequence length")

    num_frames, num_pages, ref_len = values[:3]
    if num_frames <= 0 or num_pages <= 0:
        raise ConfigError("Number of frames and pages must be positive")
    if ref_len <= 0:
        raise ConfigError("Reference sequence length must be positive")

    references = values[3:3 + ref_len]
    if len(references) < ref_len:
        raise ConfigError(
            f"Expected {ref_len} references, got {len(references)}")
    return num_frames, num_pages, references


def read_references(filename):
    references = []
    with open(filename, 'r') as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            if not line:
                continue
            for token in line.split():
                try:
                    references.append(int(token))
                except ValueError:
                    raise ConfigError(
                        f"Invalid reference {token!r} in {filename}")
    return references


def run_simulation(simulator, references, skip_invalid=False):
    for page in references:
        try:
            simulator.step(page)
        except InvalidPageError as e:
            if not skip_invalid:
                raise
            print(f"Skipping reference: {e}")
    return simulator


def build_parser():
    parser = argparse.ArgumentParser(
        description='Demand paging simulator with FIFO page replacement')
    parser.add_argument(
        'referencefile', nargs='?',
        help='File of page references. Without it, read "frames pages '
             'length refs..." from standard input')
    parser.add_argument('-f', '--frames', type=int,
                        help='Number of physical frames')
    parser.add_argument('-p', '--pages', type=int,
                        help='Number of pages in the virtual address space')
    parser.add_argument('--swap-log', default=None,
                        help='Swap log file (default: swap_simulated.txt)')
    parser.add_argument('--no-swap-log', action='store_true',
                        help='Do not write a swap log')
    parser.add_argument('--skip-invalid', action='store_true',
                        help='Skip out-of-range references instead of aborting')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Only print the final report')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.referencefile:
            if args.frames is None or args.pages is None:
                parser.error('--frames and --pages are required with a reference file')
            num_frames, num_pages = args.frames, args.pages
            references = read_references(args.referencefile)
        else:
            num_frames, num_pages, references = parse_simulation_input(
                sys.stdin.read())

        simulator = VirtualMemorySimulator(num_frames, num_pages)
        if not args.quiet:
            simulator.add_observer(ConsoleReporter())
        swap_log = None
        if not args.no_swap_log:
            swap_log = SwapLog(args.swap_log or DEFAULT_SWAP_LOG)
            simulator.add_observer(swap_log)

        print("=== Virtual Memory Simulator (FIFO) ===")
        print(f"Frames: {num_frames}, Pages: {num_pages}, "
              f"References: {len(references)}")
        print("\n--- Starting simulation ---")
        run_simulation(simulator, references, skip_invalid=args.skip_invalid)
    except (ConfigError, InvalidPageError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_final_report(simulator.final_stats(),
                              swap_log.filename if swap_log else None))
    print("\nSimulation finished.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
