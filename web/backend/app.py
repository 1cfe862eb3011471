"""
버스트 스케줄러 시뮬레이터 - FastAPI 백엔드
"""

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from core.config import DEFAULT_QUANTUM
from core.errors import SchedulerError
from schedulers import ALGORITHMS, run_scheduler

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Burst Scheduler Simulator",
    description="FCFS / Round Robin CPU 스케줄링 시뮬레이터",
    version="1.0.0"
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Pydantic 모델
class SimulationRequest(BaseModel):
    bursts: List[int]
    algorithms: List[str] = ['fcfs', 'rr']
    quantum: int = DEFAULT_QUANTUM


class GanttEntry(BaseModel):
    pid: int
    start_time: int
    end_time: int
    state: str


class ProcessResult(BaseModel):
    pid: int
    burst_time: int
    waiting_time: int
    turnaround_time: Optional[int]


class SimulationResult(BaseModel):
    algorithm: str
    total_time: int
    gantt_chart: List[GanttEntry]
    processes: List[ProcessResult]
    statistics: Dict[str, float]
    event_log: List[str]


def simulate_one(bursts: List[int], algorithm: str, quantum: int) -> SimulationResult:
    """스케줄러 실행 및 응답 모델로 변환"""
    result = run_scheduler(algorithm, bursts, quantum)

    gantt_chart = [
        GanttEntry(pid=entry.pid, start_time=entry.start_time,
                   end_time=entry.end_time, state=entry.state.value)
        for entry in result['gantt_chart']
    ]
    processes = [
        ProcessResult(pid=p.pid, burst_time=p.burst_time,
                      waiting_time=p.wait, turnaround_time=p.turnaround_time)
        for p in result['processes']
    ]

    return SimulationResult(
        algorithm=result['algorithm'],
        total_time=result['total_time'],
        gantt_chart=gantt_chart,
        processes=processes,
        statistics=result['statistics'],
        event_log=result['event_log']
    )


def simulate_all(request: SimulationRequest) -> List[SimulationResult]:
    if not request.algorithms:
        raise HTTPException(status_code=400, detail="At least one algorithm is required")
    try:
        return [simulate_one(request.bursts, algorithm, request.quantum)
                for algorithm in request.algorithms]
    except SchedulerError as e:
        logger.info("Rejected simulation request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/")
async def root():
    return {"message": "Burst Scheduler Simulator API", "version": "1.0.0"}


@app.get("/algorithms")
async def get_algorithms():
    """사용 가능한 알고리즘 목록 반환"""
    return {
        "algorithms": [
            {"id": key, "name": info['name'], "preemptive": info['preemptive'],
             "needs_quantum": info['needs_quantum']}
            for key, info in ALGORITHMS.items()
        ]
    }


@app.post("/simulate")
async def simulate(request: SimulationRequest):
    """스케줄링 시뮬레이션 실행"""
    return {"success": True, "results": simulate_all(request)}


@app.post("/simulate/compare")
async def compare_algorithms(request: SimulationRequest):
    """여러 알고리즘 비교 시뮬레이션"""
    results = simulate_all(request)

    comparison = {
        'algorithms': [],
        'avg_waiting_time': [],
        'avg_turnaround_time': [],
        'total_time': [],
        'context_switches': []
    }
    for algorithm, result in zip(request.algorithms, results):
        stats = result.statistics
        comparison['algorithms'].append(algorithm)
        comparison['avg_waiting_time'].append(stats.get('avg_waiting_time', 0))
        comparison['avg_turnaround_time'].append(stats.get('avg_turnaround_time', 0))
        comparison['total_time'].append(result.total_time)
        comparison['context_switches'].append(stats.get('context_switches', 0))

    return {
        "success": True,
        "results": results,
        "comparison": comparison
    }


@app.get("/sample-bursts")
async def get_sample_bursts():
    """샘플 버스트 데이터 반환"""
    return {
        "samples": [
            {"name": "기본 테스트 (3개 프로세스)", "bursts": [5, 8, 2]},
            {"name": "단일 프로세스", "bursts": [7]},
            {"name": "긴 작업과 짧은 작업 혼합", "bursts": [24, 3, 3]},
            {"name": "버스트 0 포함", "bursts": [0, 4, 0, 6]}
        ]
    }
