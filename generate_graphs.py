import argparse
import sys

import matplotlib.pyplot as plt

from errors import ConfigError, InvalidPageError
from simulator import VirtualMemorySimulator, read_references


def collect_fault_curve(references, num_pages, frame_counts):
    results = {}
    for num_frames in frame_counts:
        simulator = VirtualMemorySimulator(num_frames, num_pages)
        simulator.run(references)
        stats = simulator.final_stats()
        results[num_frames] = {
            'page_faults': stats.faults,
            'swaps': stats.swaps,
        }
    return results


def find_belady_anomalies(results):
    # Frame counts where one more frame produced more faults than the last
    frame_counts = sorted(results)
    anomalies = []
    for prev, cur in zip(frame_counts, frame_counts[1:]):
        if results[cur]['page_faults'] > results[prev]['page_faults']:
            anomalies.append(cur)
    return anomalies


def plot_fault_curve(results, output='fifo_fault_curve.png', title=None):
    frame_counts = sorted(results)
    faults = [results[n]['page_faults'] for n in frame_counts]
    swaps = [results[n]['swaps'] for n in frame_counts]

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.suptitle(title or 'FIFO Page Replacement', fontsize=14, fontweight='bold')

    x = range(len(frame_counts))
    width = 0.35
    bars1 = ax.bar([i - width/2 for i in x], faults, width, label='Page Faults')
    bars2 = ax.bar([i + width/2 for i in x], swaps, width, label='Swaps')

    for bar in list(bars1) + list(bars2):
        height = bar.get_height()
        ax.text(bar.get_x() + bar.get_width()/2., height,
                f'{int(height)}', ha='center', va='bottom', fontsize=9)

    for frames in find_belady_anomalies(results):
        ax.axvline(frame_counts.index(frames), color='red', linestyle='--', alpha=0.5)

    ax.set_xlabel('Frames')
    ax.set_xticks(list(x))
    ax.set_xticklabels([str(n) for n in frame_counts])
    ax.grid(axis='y', alpha=0.3)
    ax.legend()

    plt.tight_layout()
    plt.savefig(output, dpi=300, bbox_inches='tight')
    plt.close(fig)
    return output


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Plot FIFO page faults and swaps against frame count')
    parser.add_argument('referencefile', help='File of page references')
    parser.add_argument('-p', '--pages', type=int, required=True,
                        help='Number of pages in the virtual address space')
    parser.add_argument('--max-frames', type=int, default=None,
                        help='Largest frame count to simulate (default: pages)')
    parser.add_argument('-o', '--output', default='fifo_fault_curve.png')
    args = parser.parse_args(argv)
    if args.pages <= 0:
        parser.error("--pages must be a positive integer")
    if args.max_frames is not None and args.max_frames <= 0:
        parser.error("--max-frames must be a positive integer")
    max_frames = args.pages if args.max_frames is None else args.max_frames

    print("Running simulations...")
    try:
        references = read_references(args.referencefile)
        results = collect_fault_curve(references, args.pages,
                                      range(1, max_frames + 1))
    except (ConfigError, InvalidPageError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{'Frames':<10} {'Page Faults':<15} {'Swaps':<15}")
    print("-" * 40)
    for frames, r in sorted(results.items()):
        print(f"{frames:<10} {r['page_faults']:<15} {r['swaps']:<15}")

    anomalies = find_belady_anomalies(results)
    if anomalies:
        print(f"\nBelady's anomaly at frame counts: {anomalies}")

    output = plot_fault_curve(results, args.output,
                              title=f'FIFO on {args.referencefile}')
    print(f"\nGraph saved as '{output}'")
    return 0


if __name__ == '__main__':
    sys.exit(main())
