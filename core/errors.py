"""
시뮬레이터 예외 정의
"""


class SchedulerError(Exception):
    """시뮬레이터 예외의 기본 클래스"""


class InvalidInput(SchedulerError, ValueError):
    """
    잘못된 입력 (빈 버스트 목록, 음수 버스트, 잘못된 타임 퀀텀 등)
    시뮬레이션 시작 전에 검출되며 복구하지 않는다.
    """


class AllocationFailure(SchedulerError, MemoryError):
    """프로세스 테이블 생성 중 메모리 부족"""
