"""
스케줄러 기본 프레임워크 및 이벤트 관리
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import InvalidInput
from .process import ProcessRecord, ProcessState, ProcessTable

logger = logging.getLogger(__name__)


@dataclass
class GanttEntry:
    """Gantt Chart 엔트리"""
    pid: int
    start_time: int
    end_time: int
    state: ProcessState


class SchedulerStats:
    """스케줄링 통계"""

    def __init__(self):
        self.total_waiting_time = 0
        self.total_turnaround_time = 0
        self.context_switches = 0
        self.cpu_busy_time = 0
        self.total_simulation_time = 0
        self.process_count = 0

    def calculate_averages(self):
        """평균 계산"""
        if self.process_count == 0:
            return {
                'avg_waiting_time': 0,
                'avg_turnaround_time': 0,
                'total_time': 0,
                'cpu_utilization': 0,
                'context_switches': 0
            }

        return {
            'avg_waiting_time': self.total_waiting_time / self.process_count,
            'avg_turnaround_time': self.total_turnaround_time / self.process_count,
            'total_time': self.total_simulation_time,
            'cpu_utilization': (self.cpu_busy_time / self.total_simulation_time * 100)
                               if self.total_simulation_time > 0 else 0,
            'context_switches': self.context_switches
        }


class BaseScheduler:
    """
    기본 스케줄러 클래스
    모든 스케줄링 알고리즘의 공통 기능 제공

    프로세스 테이블은 실행 동안 스케줄러가 독점하며 파괴적으로 소비된다.
    """

    def __init__(self, table: ProcessTable, name: str = "Base Scheduler"):
        if not isinstance(table, ProcessTable):
            raise InvalidInput(f"Expected a ProcessTable, got {type(table).__name__}")
        if not table.is_pristine():
            raise InvalidInput("Process table has already been simulated; create a new one")

        self.table = table
        self.name = name
        self.current_time = 0
        self.previous_process: Optional[ProcessRecord] = None

        # Gantt Chart 데이터
        self.gantt_chart: List[GanttEntry] = []

        # 통계
        self.stats = SchedulerStats()

        # 이벤트 로그
        self.event_log: List[str] = []

    def log_event(self, message: str):
        """이벤트 로그 기록"""
        log_entry = f"[T={self.current_time:3d}] {message}"
        self.event_log.append(log_entry)
        logger.debug("%s: %s", self.name, log_entry)

    def add_to_gantt_chart(self, pid: int, start: int, end: int, state: ProcessState):
        """Gantt Chart에 엔트리 추가"""
        if start < end:  # 유효한 시간 구간만 추가
            self.gantt_chart.append(GanttEntry(pid, start, end, state))

    def dispatch(self, process: ProcessRecord):
        """
        프로세스를 CPU에 올림
        다른 프로세스로 바뀔 때만 문맥 전환으로 센다 (첫 실행 제외).
        """
        if self.previous_process is not None and self.previous_process.pid != process.pid:
            self.stats.context_switches += 1
            self.log_event(f"Context Switch: P{self.previous_process.pid} → P{process.pid}")

        self.previous_process = process
        process.state = ProcessState.RUNNING
        self.log_event(f"P{process.pid} → Running")

    def record_slice(self, process: ProcessRecord, start: int, end: int):
        """실행 구간 기록 및 완료 처리"""
        self.add_to_gantt_chart(process.pid, start, end, ProcessState.RUNNING)
        self.stats.cpu_busy_time += end - start

        if process.is_completed():
            self.terminate_process(process, end)
        else:
            process.state = ProcessState.READY
            self.log_event(f"P{process.pid} preempted → Ready (left={process.burst_remaining})")

    def terminate_process(self, process: ProcessRecord, finish_time: int):
        """프로세스 종료 처리"""
        process.state = ProcessState.TERMINATED
        process.finish_time = finish_time
        self.log_event(f"P{process.pid} → Terminated (WT={process.wait}, TT={process.turnaround_time})")

    def update_statistics(self):
        """최종 통계 업데이트"""
        self.stats.total_simulation_time = self.current_time
        self.stats.process_count = len(self.table)
        self.stats.total_waiting_time = self.table.total_wait()
        self.stats.total_turnaround_time = sum(p.turnaround_time or 0 for p in self.table)

    def select_next_process(self) -> Optional[int]:
        """
        다음 실행할 프로세스 선택 (하위 클래스에서 구현)

        Returns:
            선택된 프로세스의 테이블 위치 또는 None
        """
        raise NotImplementedError("Subclasses must implement select_next_process()")

    def is_simulation_complete(self) -> bool:
        """시뮬레이션 완료 여부 확인"""
        return self.table.is_completed()

    def run(self, verbose: bool = False) -> int:
        """
        스케줄링 시뮬레이션 실행

        Args:
            verbose: 상세 로그 출력 여부

        Returns:
            총 실행 시간 (makespan)
        """
        raise NotImplementedError("Subclasses must implement run()")

    def print_event_log(self):
        for log in self.event_log:
            print(log)

    def get_results(self) -> Dict:
        """
        시뮬레이션 결과 반환

        Returns:
            결과 딕셔너리 (통계, Gantt Chart, 로그 등)
        """
        self.update_statistics()

        return {
            'algorithm': self.name,
            'total_time': self.current_time,
            'statistics': self.stats.calculate_averages(),
            'gantt_chart': self.gantt_chart,
            'event_log': self.event_log,
            'processes': list(self.table),
            'table': self.table
        }
