"""
FCFS (First-Come, First-Served) Scheduler
비선점형: 테이블 순서대로 각 프로세스를 끝까지 실행
"""

from typing import Optional

from core.process import ProcessTable
from core.scheduler_base import BaseScheduler


class FCFSScheduler(BaseScheduler):
    """
    FCFS (First-Come, First-Served) 스케줄러
    비선점형: 먼저 들어온 프로세스를 먼저 처리
    """

    def __init__(self, table: ProcessTable):
        super().__init__(table, "FCFS")
        self.position = 0

    def select_next_process(self) -> Optional[int]:
        """테이블 순서상 다음으로 남은 버스트가 있는 프로세스 선택"""
        while self.position < len(self.table):
            index = self.position
            self.position += 1
            # 버스트가 0인 프로세스는 건너뜀 (대기 시간 0 유지)
            if self.table[index].burst_remaining > 0:
                return index
        return None

    def run(self, verbose: bool = False) -> int:
        """FCFS 스케줄링 실행"""
        self.log_event(f"===== {self.name} Scheduling Started =====")

        while True:
            index = self.select_next_process()
            if index is None:
                break

            process = self.table[index]
            self.dispatch(process)

            start = self.current_time
            # 대기 시간 = 이 프로세스 시작 전까지 누적된 시간
            process.wait = start
            self.current_time += process.burst_remaining
            process.burst_remaining = 0

            self.record_slice(process, start, self.current_time)

        self.log_event(f"===== {self.name} Scheduling Completed =====")

        if verbose:
            self.print_event_log()

        return self.current_time


def fcfs_run(table: ProcessTable) -> int:
    """테이블을 FCFS로 끝까지 실행하고 총 실행 시간 반환"""
    return FCFSScheduler(table).run()
