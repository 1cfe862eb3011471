"""
Core modules for the burst-time scheduler simulator
"""

from .errors import SchedulerError, InvalidInput, AllocationFailure
from .process import ProcessRecord, ProcessState, ProcessTable
from .scheduler_base import BaseScheduler, SchedulerStats, GanttEntry
from .config import SimulatorConfig, DEFAULT_QUANTUM

__all__ = [
    'SchedulerError',
    'InvalidInput',
    'AllocationFailure',
    'ProcessRecord',
    'ProcessState',
    'ProcessTable',
    'BaseScheduler',
    'SchedulerStats',
    'GanttEntry',
    'SimulatorConfig',
    'DEFAULT_QUANTUM'
]
