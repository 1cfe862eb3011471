"""
시뮬레이터 설정
기본값은 환경 변수 SCHED_* 로 덮어쓸 수 있다.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import InvalidInput

# 기본 타임 퀀텀
DEFAULT_QUANTUM = 4

# 결과 저장 디렉토리
DEFAULT_OUTPUT_DIR = "simulation_results"

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class SimulatorConfig:
    """실행 설정"""
    default_quantum: int = DEFAULT_QUANTUM
    output_dir: str = DEFAULT_OUTPUT_DIR
    log_level: str = 'WARNING'
    host: str = '0.0.0.0'
    port: int = 8000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SimulatorConfig':
        """
        환경 변수에서 설정 읽기

        SCHED_DEFAULT_QUANTUM, SCHED_OUTPUT_DIR, SCHED_LOG_LEVEL,
        SCHED_HOST, SCHED_PORT
        """
        env = os.environ if environ is None else environ
        config = cls()

        if 'SCHED_DEFAULT_QUANTUM' in env:
            config.default_quantum = _parse_positive_int(
                'SCHED_DEFAULT_QUANTUM', env['SCHED_DEFAULT_QUANTUM'])
        if 'SCHED_PORT' in env:
            config.port = _parse_positive_int('SCHED_PORT', env['SCHED_PORT'])
        if env.get('SCHED_OUTPUT_DIR'):
            config.output_dir = env['SCHED_OUTPUT_DIR']
        if env.get('SCHED_HOST'):
            config.host = env['SCHED_HOST']
        if 'SCHED_LOG_LEVEL' in env:
            level = env['SCHED_LOG_LEVEL'].strip().upper()
            if level not in LOG_LEVELS:
                raise InvalidInput(f"SCHED_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: {level}")
            config.log_level = level

        return config


def _parse_positive_int(name: str, value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise InvalidInput(f"{name} must be an integer: {value!r}")
    if number <= 0:
        raise InvalidInput(f"{name} must be positive: {number}")
    return number
