"""
CPU Scheduling Algorithms
"""

from .fcfs import FCFSScheduler, fcfs_run
from .round_robin import RoundRobinScheduler, rr_next, rr_run
from .registry import ALGORITHMS, create_scheduler, run_scheduler, simulate

__all__ = [
    'FCFSScheduler',
    'RoundRobinScheduler',
    'fcfs_run',
    'rr_next',
    'rr_run',
    'ALGORITHMS',
    'create_scheduler',
    'run_scheduler',
    'simulate'
]
