"""
알고리즘 등록 및 실행 진입점
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

from core.errors import InvalidInput
from core.process import ProcessTable
from core.scheduler_base import BaseScheduler
from .fcfs import FCFSScheduler
from .round_robin import RoundRobinScheduler

logger = logging.getLogger(__name__)


# 사용 가능한 알고리즘 정의
ALGORITHMS = {
    'fcfs': {
        'name': 'FCFS (First-Come, First-Served)',
        'class': FCFSScheduler,
        'preemptive': False,
        'needs_quantum': False
    },
    'rr': {
        'name': 'Round Robin',
        'class': RoundRobinScheduler,
        'preemptive': True,
        'needs_quantum': True
    }
}


def create_scheduler(algorithm: str, table: ProcessTable,
                     quantum: Optional[int] = None) -> BaseScheduler:
    """
    알고리즘 이름으로 스케줄러 생성

    Args:
        algorithm: 'fcfs' 또는 'rr'
        table: 초기 상태의 프로세스 테이블
        quantum: 타임 퀀텀 ('rr'에서 필수, 'fcfs'에서는 무시)
    """
    key = algorithm.lower() if isinstance(algorithm, str) else algorithm
    if key not in ALGORITHMS:
        raise InvalidInput(f"Unknown algorithm: {algorithm}")

    algo_info = ALGORITHMS[key]
    if algo_info['needs_quantum']:
        if quantum is None:
            raise InvalidInput(f"{algo_info['name']} requires a time quantum")
        return algo_info['class'](table, quantum)
    return algo_info['class'](table)


def run_scheduler(algorithm: str, bursts: Iterable[int],
                  quantum: Optional[int] = None, verbose: bool = False) -> Dict:
    """
    새 프로세스 테이블로 스케줄러 실행 및 결과 반환

    Returns:
        결과 딕셔너리 (BaseScheduler.get_results 참고)
    """
    table = ProcessTable.create(bursts)
    scheduler = create_scheduler(algorithm, table, quantum)
    total_time = scheduler.run(verbose=verbose)
    logger.info("%s finished: total_time=%d, avg_wait=%.2f",
                scheduler.name, total_time, table.average_wait())
    return scheduler.get_results()


def simulate(algorithm: str, bursts: Iterable[int],
             quantum: Optional[int] = None) -> Tuple[ProcessTable, int]:
    """
    시뮬레이션 실행

    Returns:
        (실행이 끝난 프로세스 테이블, 총 실행 시간)
    """
    result = run_scheduler(algorithm, bursts, quantum)
    return result['table'], result['total_time']
