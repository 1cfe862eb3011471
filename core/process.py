"""
프로세스 및 PCB (Process Control Block) 관리 모듈
"""

import logging
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from .errors import AllocationFailure, InvalidInput

logger = logging.getLogger(__name__)


class ProcessState(Enum):
    """프로세스 상태"""
    READY = "Ready"
    RUNNING = "Running"
    TERMINATED = "Terminated"


class ProcessRecord:
    """
    프로세스 제어 블록 (PCB)
    버스트 시간만으로 정의되는 프로세스 하나의 상태를 관리
    """

    def __init__(self, pid: int, burst_time: int):
        """
        Args:
            pid: 프로세스 ID (입력 순서, 0부터 시작)
            burst_time: 총 CPU 버스트 시간
        """
        self.pid = pid
        self.burst_time = burst_time
        self.burst_remaining = burst_time
        self.wait = 0

        # 표시용 정보
        self.state = ProcessState.READY if burst_time > 0 else ProcessState.TERMINATED
        self.finish_time: Optional[int] = None if burst_time > 0 else 0

    def is_completed(self) -> bool:
        """프로세스가 완료되었는지 확인"""
        return self.burst_remaining == 0

    @property
    def turnaround_time(self) -> Optional[int]:
        """반환 시간 (모든 프로세스는 0에 도착하므로 완료 시간과 같다)"""
        return self.finish_time

    def __eq__(self, other):
        if not isinstance(other, ProcessRecord):
            return NotImplemented
        return (self.pid, self.burst_time, self.burst_remaining, self.wait) == \
               (other.pid, other.burst_time, other.burst_remaining, other.wait)

    def __repr__(self):
        return f"P{self.pid}[{self.state.value}]"

    def __str__(self):
        return f"Process {self.pid}: Burst Left={self.burst_remaining}, Wait={self.wait}"


class ProcessTable:
    """
    프로세스 테이블
    생성 순서가 곧 스케줄링 순서이며 동률 처리 기준이다.
    시뮬레이션 한 번에 파괴적으로 소비되므로 알고리즘마다 새로 생성해야 한다.
    """

    def __init__(self, records: List[ProcessRecord]):
        self._records = records

    @classmethod
    def create(cls, bursts: Iterable[int]) -> 'ProcessTable':
        """
        버스트 시간 목록으로 프로세스 테이블 생성

        Args:
            bursts: 0 이상의 정수 버스트 시간 시퀀스

        Returns:
            초기 상태의 프로세스 테이블

        Raises:
            InvalidInput: 목록이 비어 있거나 음수/정수가 아닌 값이 있는 경우
            AllocationFailure: 테이블 생성 중 메모리 부족
        """
        try:
            values = list(bursts)
        except MemoryError as e:
            raise AllocationFailure(f"Failed to allocate process table: {e}") from e

        if not values:
            raise InvalidInput("At least one burst time is required")

        for i, burst in enumerate(values):
            if isinstance(burst, bool) or not isinstance(burst, int):
                raise InvalidInput(f"Burst time of P{i} must be an integer: {burst!r}")
            if burst < 0:
                raise InvalidInput(f"Burst time of P{i} must be non-negative: {burst}")

        try:
            records = [ProcessRecord(pid, burst) for pid, burst in enumerate(values)]
        except MemoryError as e:
            raise AllocationFailure(f"Failed to allocate process table: {e}") from e

        logger.debug("Created process table with %d processes", len(records))
        return cls(records)

    def advance(self, index: int, amount: int):
        """
        index 위치의 프로세스를 amount만큼 실행
        실행 중인 프로세스의 남은 버스트를 줄이고 (0 미만으로 내려가지 않음),
        아직 완료되지 않은 다른 모든 프로세스의 대기 시간을 amount만큼 늘린다.

        호출자는 amount를 min(남은 버스트, 퀀텀)으로 미리 잘라서 넘겨야 한다.
        이미 완료된 프로세스에 대해서는 아무것도 하지 않는다.
        """
        if amount < 0:
            raise InvalidInput(f"Run amount must be non-negative: {amount}")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._records):
            raise InvalidInput(f"Process index out of range: {index!r}")

        target = self._records[index]
        if target.is_completed():
            return

        target.burst_remaining = max(0, target.burst_remaining - amount)

        for i, record in enumerate(self._records):
            if i != index and record.burst_remaining > 0:
                record.wait += amount

    def is_pristine(self) -> bool:
        """아직 어떤 시뮬레이션에도 사용되지 않은 초기 상태인지 확인"""
        return all(r.burst_remaining == r.burst_time and r.wait == 0
                   for r in self._records)

    def is_completed(self) -> bool:
        """모든 프로세스가 완료되었는지 확인"""
        return all(r.is_completed() for r in self._records)

    def total_wait(self) -> int:
        return sum(r.wait for r in self._records)

    def average_wait(self) -> float:
        """평균 대기 시간 = 대기 시간 합 / 프로세스 수"""
        return self.total_wait() / len(self._records)

    @property
    def bursts(self) -> List[int]:
        """원래 버스트 시간 목록"""
        return [r.burst_time for r in self._records]

    @property
    def waits(self) -> List[int]:
        return [r.wait for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProcessRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> ProcessRecord:
        return self._records[index]

    def __eq__(self, other):
        if not isinstance(other, ProcessTable):
            return NotImplemented
        return self._records == other._records

    def __repr__(self):
        return f"ProcessTable({self._records!r})"
