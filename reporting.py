import sys

from events import ReplacementObserver

DEFAULT_SWAP_LOG = 'swap_simulated.txt'
SWAP_LOG_HEADER = '=== Swap simulated log ==='


class ConsoleReporter(ReplacementObserver):
    """Prints one progress line per reference."""

    def __init__(self, out=None):
        self.out = out
        self.prefix = ''

    def _write(self, text):
        print(text, file=self.out or sys.stdout)

    def _line_start(self, step, page):
        return f"Reference {step:2d}: page {page} --> "

    def on_hit(self, step, page, frame):
        self._write(f"{self._line_start(step, page)}HIT (in frame {frame})")

    def on_fault(self, step, page):
        self.prefix = f"{self._line_start(step, page)}PAGE FAULT -> "

    def on_loaded(self, step, page, frame, free_frames):
        self._write(f"{self.prefix}loaded into frame {frame} "
                    f"(free frames now {free_frames})")

    def on_evicted_and_loaded(self, step, victim_page, page, frame):
        self._write(f"{self.prefix}evicted page {victim_page} (frame {frame}) "
                    f"-> loaded page {page} into the same frame")


class SwapLog(ReplacementObserver):
    """Append-per-line text log of swap-outs. Opening it truncates the file."""

    def __init__(self, filename=DEFAULT_SWAP_LOG):
        self.filename = filename
        with open(self.filename, 'w') as f:
            f.write(SWAP_LOG_HEADER + '\n')

    def on_swap_out(self, step, page, frame):
        with open(self.filename, 'a') as f:
            f.write(f"Step {step}: swapped out page {page} from frame {frame}\n")


def format_final_report(stats, swap_log_filename=None):
    rate = stats.faults / stats.total_refs if stats.total_refs else 0.0
    swaps = f"Swaps (simulated) to disk: {stats.swaps}"
    if swap_log_filename:
        swaps += f" (log in '{swap_log_filename}')"

    lines = [
        "\n--- Statistics ---",
        f"Number of references: {stats.total_refs}",
        f"Page faults: {stats.faults}",
        f"Page fault rate: {rate:.3f}",
        swaps,
        "Final frame state (frame: page):",
    ]
    for frame, page in enumerate(stats.frame_occupancy):
        lines.append(f"  frame {frame:2d}: {'-' if page is None else page}")
    return '\n'.join(lines)
