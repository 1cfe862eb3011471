"""
입력 데이터 파서 및 버스트 목록 생성 모듈
"""

import logging
import random
import re
from typing import List, Optional, Sequence

from core.errors import InvalidInput

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r'[,\s]+')


class InputParser:
    """명령행 인자 및 버스트 파일 파서"""

    @staticmethod
    def parse_burst(token: str, index: int = 0) -> int:
        """버스트 토큰 하나를 정수로 변환"""
        try:
            burst = int(str(token).strip())
        except ValueError:
            raise InvalidInput(f"Burst time of P{index} is not a number: {token!r}")
        if burst < 0:
            raise InvalidInput(f"Burst time of P{index} must be non-negative: {burst}")
        return burst

    @staticmethod
    def parse_bursts(tokens: Sequence[str]) -> List[int]:
        """
        버스트 토큰 목록 파싱

        Args:
            tokens: 명령행에서 받은 문자열 목록

        Returns:
            0 이상의 정수 버스트 목록

        Raises:
            InvalidInput: 목록이 비었거나 숫자가 아니거나 음수인 경우
        """
        if not tokens:
            raise InvalidInput("Missing burst times")
        return [InputParser.parse_burst(token, i) for i, token in enumerate(tokens)]

    @staticmethod
    def parse_quantum(token: str) -> int:
        """타임 퀀텀 파싱 (양의 정수)"""
        try:
            quantum = int(str(token).strip())
        except ValueError:
            raise InvalidInput(f"Time quantum is not a number: {token!r}")
        if quantum <= 0:
            raise InvalidInput(f"Time quantum must be positive: {quantum}")
        return quantum

    @staticmethod
    def parse_file(filename: str) -> List[int]:
        """
        파일에서 버스트 목록 읽기

        파일 형식: 한 줄에 하나 이상의 버스트 (쉼표 또는 공백 구분)
        '#'으로 시작하는 줄과 빈 줄은 무시
        예:
            # 워크로드
            5, 8
            2

        Raises:
            InvalidInput: 파일이 없거나 잘못된 값이 있는 경우
        """
        bursts: List[int] = []

        try:
            with open(filename, 'r', encoding='utf-8') as f:
                for line_no, line in enumerate(f, 1):
                    line = line.strip()

                    # 주석 및 빈 줄 제거
                    if not line or line.startswith('#'):
                        continue

                    for token in _SEPARATOR.split(line):
                        if not token:
                            continue
                        try:
                            bursts.append(InputParser.parse_burst(token, len(bursts)))
                        except InvalidInput as e:
                            raise InvalidInput(f"{filename}:{line_no}: {e}") from e
        except OSError as e:
            raise InvalidInput(f"Cannot read burst file '{filename}': {e}") from e

        if not bursts:
            raise InvalidInput(f"No burst times found in '{filename}'")

        logger.info("Loaded %d burst times from %s", len(bursts), filename)
        return bursts

    @staticmethod
    def generate_random_bursts(num_processes: int = 10,
                               max_burst: int = 30,
                               seed: Optional[int] = None) -> List[int]:
        """
        랜덤 버스트 목록 생성

        Args:
            num_processes: 생성할 프로세스 수
            max_burst: 최대 CPU 버스트 시간
            seed: 랜덤 시드
        """
        if num_processes <= 0:
            raise InvalidInput(f"Number of processes must be positive: {num_processes}")
        if max_burst <= 0:
            raise InvalidInput(f"Maximum burst must be positive: {max_burst}")

        rng = random.Random(seed)
        return [rng.randint(1, max_burst) for _ in range(num_processes)]

    @staticmethod
    def save_bursts_to_file(bursts: Sequence[int], filename: str):
        """버스트 목록을 parse_file 형식으로 저장"""
        with open(filename, 'w', encoding='utf-8') as f:
            f.write("# Burst Scheduler Input Data\n")
            f.write("# Format: one CPU burst per line\n\n")
            for burst in bursts:
                f.write(f"{burst}\n")

        logger.info("Saved %d burst times to %s", len(bursts), filename)
