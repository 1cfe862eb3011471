"""Tests for the process table: creation and the advance primitive."""

import pytest

from core.errors import AllocationFailure, InvalidInput
from core.process import ProcessState, ProcessTable


class TestProcessTableCreation:
    """Verify construction from burst times."""

    def test_records_follow_input_order(self, sample_bursts):
        table = ProcessTable.create(sample_bursts)
        assert len(table) == 3
        assert [p.pid for p in table] == [0, 1, 2]
        assert [p.burst_remaining for p in table] == [5, 8, 2]
        assert table.waits == [0, 0, 0]

    def test_creation_is_idempotent(self, sample_bursts):
        assert ProcessTable.create(sample_bursts) == ProcessTable.create(sample_bursts)

    def test_accepts_any_iterable(self):
        table = ProcessTable.create(b for b in (1, 2))
        assert table.bursts == [1, 2]

    def test_empty_sequence_raises(self):
        with pytest.raises(InvalidInput):
            ProcessTable.create([])

    def test_negative_burst_raises(self):
        with pytest.raises(InvalidInput, match="P1"):
            ProcessTable.create([3, -1, 2])

    @pytest.mark.parametrize("bad", ["5", 2.5, True, None])
    def test_non_integer_burst_raises(self, bad):
        with pytest.raises(InvalidInput):
            ProcessTable.create([1, bad])

    def test_memory_error_becomes_allocation_failure(self):
        class Exhausted:
            def __iter__(self):
                raise MemoryError("out of memory")

        with pytest.raises(AllocationFailure):
            ProcessTable.create(Exhausted())

    def test_zero_burst_record_starts_terminated(self):
        table = ProcessTable.create([0, 4])
        assert table[0].state == ProcessState.TERMINATED
        assert table[0].finish_time == 0
        assert table[1].state == ProcessState.READY
        assert table[1].finish_time is None

    def test_new_table_is_pristine(self, sample_bursts):
        assert ProcessTable.create(sample_bursts).is_pristine()


class TestAdvance:
    """Verify the run-one-process clock tick."""

    def test_runs_target_and_charges_others(self, sample_bursts):
        table = ProcessTable.create(sample_bursts)
        table.advance(0, 4)
        assert [p.burst_remaining for p in table] == [1, 8, 2]
        assert table.waits == [0, 4, 4]
        assert not table.is_pristine()

    def test_burst_is_clamped_at_zero(self):
        table = ProcessTable.create([3, 4])
        table.advance(0, 5)
        assert table[0].burst_remaining == 0
        assert table[1].wait == 5

    def test_completed_processes_are_not_charged(self):
        table = ProcessTable.create([2, 0, 3])
        table.advance(0, 2)
        assert table.waits == [0, 0, 2]

    def test_completed_target_is_noop(self):
        table = ProcessTable.create([0, 3])
        table.advance(0, 2)
        assert table.waits == [0, 0]
        assert table[1].burst_remaining == 3

    def test_negative_amount_raises(self, sample_bursts):
        table = ProcessTable.create(sample_bursts)
        with pytest.raises(InvalidInput):
            table.advance(0, -1)
        assert table.is_pristine()

    @pytest.mark.parametrize("index", [-1, 2, 5])
    def test_index_outside_table_raises(self, index):
        table = ProcessTable.create([3, 3])
        with pytest.raises(InvalidInput, match="out of range"):
            table.advance(index, 2)
        assert table.is_pristine()

    def test_running_process_is_never_charged_wait(self):
        table = ProcessTable.create([3, 3])
        table.advance(1, 2)
        assert [p.burst_remaining for p in table] == [3, 1]
        assert table.waits == [2, 0]

    def test_average_wait(self):
        table = ProcessTable.create([4, 4])
        table.advance(0, 4)
        assert table.total_wait() == 4
        assert table.average_wait() == 2.0
