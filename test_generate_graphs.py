import matplotlib
matplotlib.use('Agg')

import pytest

from generate_graphs import collect_fault_curve, find_belady_anomalies, main, plot_fault_curve

BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def test_collect_fault_curve():
    results = collect_fault_curve(BELADY, 6, range(1, 6))

    assert results[1] == {'page_faults': 12, 'swaps': 11}
    assert results[3] == {'page_faults': 9, 'swaps': 6}
    assert results[4] == {'page_faults': 10, 'swaps': 6}
    assert results[5] == {'page_faults': 5, 'swaps': 0}


def test_find_belady_anomalies():
    results = collect_fault_curve(BELADY, 6, range(1, 6))
    assert find_belady_anomalies(results) == [4]


def test_no_anomaly_for_repeating_loop():
    results = collect_fault_curve([0, 1, 2, 0, 1, 2], 3, range(1, 4))
    assert find_belady_anomalies(results) == []


def test_plot_fault_curve(tmp_path):
    results = collect_fault_curve(BELADY, 6, range(1, 6))
    output = plot_fault_curve(results, str(tmp_path / 'curve.png'))
    assert (tmp_path / 'curve.png').stat().st_size > 0
    assert output == str(tmp_path / 'curve.png')


def test_main(tmp_path, capsys):
    refs = tmp_path / 'refs.txt'
    refs.write_text(' '.join(str(page) for page in BELADY))
    output = tmp_path / 'out.png'

    assert main([str(refs), '-p', '6', '-o', str(output)]) == 0

    out = capsys.readouterr().out
    assert "Belady's anomaly at frame counts: [4]" in out
    assert output.exists()


def test_main_reports_invalid_reference(tmp_path, capsys):
    refs = tmp_path / 'refs.txt'
    refs.write_text('0 1 9')
    output = tmp_path / 'out.png'

    assert main([str(refs), '-p', '3', '-o', str(output)]) == 1

    assert capsys.readouterr().err.startswith('Error: Invalid page 9')
    assert not output.exists()


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / 'missing.txt'), '-p', '3']) == 1
    assert capsys.readouterr().err.startswith('Error:')


@pytest.mark.parametrize('args', [
    ['-p', '6', '--max-frames', '0'],
    ['-p', '6', '--max-frames', '-2'],
    ['-p', '0'],
])
def test_main_rejects_nonpositive_counts(tmp_path, args):
    refs = tmp_path / 'refs.txt'
    refs.write_text('0 1 2')
    with pytest.raises(SystemExit):
        main([str(refs)] + args)
