"""
Round Robin Scheduler
선점형: 각 프로세스에게 최대 한 타임 퀀텀씩 순환하며 CPU를 할당
"""

from typing import Optional

from core.errors import InvalidInput
from core.process import ProcessTable
from core.scheduler_base import BaseScheduler

# 아직 아무 프로세스도 실행되지 않았음을 나타내는 위치 (첫 탐색이 0부터 시작)
NO_PROCESS = -1


def rr_next(current: int, table: ProcessTable) -> Optional[int]:
    """
    current 다음 위치부터 테이블을 한 바퀴 순환하며
    남은 버스트가 있는 첫 프로세스의 위치를 반환

    Returns:
        다음 프로세스 위치, 모두 완료되었으면 None
    """
    size = len(table)
    for offset in range(1, size + 1):
        candidate = (current + offset) % size
        if table[candidate].burst_remaining > 0:
            return candidate
    return None


class RoundRobinScheduler(BaseScheduler):
    """
    Round Robin 스케줄러
    선택된 프로세스를 min(남은 버스트, 퀀텀)만큼 실행하고,
    그 동안 완료되지 않은 다른 모든 프로세스의 대기 시간을 늘린다.
    """

    def __init__(self, table: ProcessTable, quantum: int):
        if isinstance(quantum, bool) or not isinstance(quantum, int):
            raise InvalidInput(f"Time quantum must be an integer: {quantum!r}")
        if quantum <= 0:
            raise InvalidInput(f"Time quantum must be positive: {quantum}")

        super().__init__(table, f"RR (q={quantum})")
        self.quantum = quantum
        self.current = NO_PROCESS

    def select_next_process(self) -> Optional[int]:
        return rr_next(self.current, self.table)

    def execute_one_step(self) -> bool:
        """
        한 퀀텀 실행

        Returns:
            시뮬레이션이 끝났는지 여부
        """
        index = self.select_next_process()
        if index is None:
            return True

        self.current = index
        process = self.table[index]
        self.dispatch(process)

        run_time = min(process.burst_remaining, self.quantum)
        start = self.current_time
        self.table.advance(index, run_time)
        self.current_time += run_time

        self.record_slice(process, start, self.current_time)
        return False

    def run(self, verbose: bool = False) -> int:
        """Round Robin 스케줄링 실행"""
        self.log_event(f"===== {self.name} Scheduling Started =====")

        while not self.execute_one_step():
            pass

        self.log_event(f"===== {self.name} Scheduling Completed =====")

        if verbose:
            self.print_event_log()

        return self.current_time


def rr_run(table: ProcessTable, quantum: int) -> int:
    """테이블을 Round Robin으로 끝까지 실행하고 총 실행 시간 반환"""
    return RoundRobinScheduler(table, quantum).run()
