"""Tests for text tables and matplotlib charts."""

from core.process import ProcessTable
from schedulers import run_scheduler
from utils.visualization import Visualizer


def test_process_table_text(sample_bursts):
    table = ProcessTable.create(sample_bursts)
    text = Visualizer.format_process_table(table)
    lines = text.splitlines()
    assert lines[0] == "PID\tBurst Left\tWait"
    assert lines[1] == "0\t5\t\t0"
    assert len(lines) == 4


def test_statistics_table_lists_each_algorithm(sample_bursts):
    results = [run_scheduler('fcfs', sample_bursts), run_scheduler('rr', sample_bursts, 4)]
    text = Visualizer.format_statistics_table(results)
    assert "FCFS" in text
    assert "RR (q=4)" in text
    assert "6.00" in text
    assert "7.00" in text


def test_gantt_chart_saved(tmp_path, sample_bursts):
    result = run_scheduler('rr', sample_bursts, 4)
    path = tmp_path / "gantt.png"
    assert Visualizer().draw_gantt_chart(result['gantt_chart'], result['algorithm'],
                                         save_path=str(path), show=False)
    assert path.exists()


def test_gantt_chart_without_data():
    assert not Visualizer().draw_gantt_chart([], "FCFS", show=False)


def test_comparison_chart_saved(tmp_path, sample_bursts):
    results = [run_scheduler('fcfs', sample_bursts), run_scheduler('rr', sample_bursts, 2)]
    path = tmp_path / "comparison.png"
    assert Visualizer().compare_algorithms(results, save_path=str(path), show=False)
    assert path.exists()
