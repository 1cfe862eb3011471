"""Tests for the First-Come-First-Served scheduler."""

import random

import pytest

from core.errors import InvalidInput
from core.process import ProcessState, ProcessTable
from schedulers.fcfs import FCFSScheduler, fcfs_run


def random_workloads(count=20, seed=7):
    rng = random.Random(seed)
    return [[rng.randint(0, 12) for _ in range(rng.randint(1, 8))] for _ in range(count)]


class TestFCFSScenario:
    """Bursts [5, 8, 2] run in table order."""

    def test_total_time(self, sample_bursts):
        assert fcfs_run(ProcessTable.create(sample_bursts)) == 15

    def test_waits_and_average(self, sample_bursts):
        table = ProcessTable.create(sample_bursts)
        fcfs_run(table)
        assert table.waits == [0, 5, 13]
        assert table.average_wait() == 6.0

    def test_all_processes_complete(self, sample_bursts):
        table = ProcessTable.create(sample_bursts)
        fcfs_run(table)
        assert table.is_completed()
        assert all(p.state == ProcessState.TERMINATED for p in table)
        assert [p.finish_time for p in table] == [5, 13, 15]

    def test_gantt_chart_and_switches(self, sample_bursts):
        scheduler = FCFSScheduler(ProcessTable.create(sample_bursts))
        scheduler.run()
        slices = [(e.pid, e.start_time, e.end_time) for e in scheduler.gantt_chart]
        assert slices == [(0, 0, 5), (1, 5, 13), (2, 13, 15)]
        assert scheduler.stats.context_switches == 2

    def test_results_dict(self, sample_bursts):
        scheduler = FCFSScheduler(ProcessTable.create(sample_bursts))
        scheduler.run()
        results = scheduler.get_results()
        assert results['algorithm'] == "FCFS"
        assert results['total_time'] == 15
        assert results['statistics']['avg_waiting_time'] == 6.0
        assert results['statistics']['avg_turnaround_time'] == 11.0
        assert results['statistics']['cpu_utilization'] == 100.0


class TestFCFSProperties:

    @pytest.mark.parametrize("bursts", random_workloads())
    def test_total_time_is_sum_of_bursts(self, bursts):
        assert fcfs_run(ProcessTable.create(bursts)) == sum(bursts)

    @pytest.mark.parametrize("bursts", random_workloads())
    def test_wait_is_prefix_sum(self, bursts):
        table = ProcessTable.create(bursts)
        fcfs_run(table)
        for i, process in enumerate(table):
            expected = sum(bursts[:i]) if bursts[i] > 0 else 0
            assert process.wait == expected


class TestFCFSEdgeCases:

    def test_single_process(self):
        table = ProcessTable.create([7])
        assert fcfs_run(table) == 7
        assert table.waits == [0]

    def test_all_zero_bursts(self):
        table = ProcessTable.create([0, 0, 0])
        assert fcfs_run(table) == 0
        assert table.waits == [0, 0, 0]

    def test_zero_burst_is_skipped(self):
        table = ProcessTable.create([3, 0, 4])
        assert fcfs_run(table) == 7
        assert table.waits == [0, 0, 3]

    def test_consumed_table_is_rejected(self, sample_bursts):
        table = ProcessTable.create(sample_bursts)
        fcfs_run(table)
        with pytest.raises(InvalidInput):
            fcfs_run(table)

    def test_verbose_prints_event_log(self, sample_bursts, capsys):
        FCFSScheduler(ProcessTable.create(sample_bursts)).run(verbose=True)
        out = capsys.readouterr().out
        assert "[T=  0] P0 → Running" in out
        assert "FCFS Scheduling Completed" in out
