#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
버스트 스케줄러 시뮬레이터 - 메인 실행 파일

사용법:
    main.py fcfs <burst>...
    main.py rr <quantum> <burst>...
    main.py compare [--quantum Q] <burst>...
"""

import argparse
import logging
import os
import re
import sys
from typing import Dict, List, Optional

from core.config import SimulatorConfig
from core.errors import SchedulerError, InvalidInput
from schedulers import ALGORITHMS, run_scheduler
from utils.input_parser import InputParser
from utils.visualization import Visualizer

logger = logging.getLogger(__name__)


def build_parser(config: SimulatorConfig) -> argparse.ArgumentParser:
    """명령행 파서 생성"""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-v', '--verbose', action='store_true',
                        help='print the scheduling event log')
    common.add_argument('--file', metavar='PATH',
                        help='read burst times from a file instead of the command line')
    common.add_argument('--save', metavar='DIR',
                        help=f'save Gantt charts and results to DIR (e.g. {config.output_dir})')
    common.add_argument('--log-level', default=config.log_level,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        type=str.upper, help='logging level')

    parser = argparse.ArgumentParser(
        prog='burst-sched',
        description='FCFS / Round Robin CPU scheduling simulator')
    subparsers = parser.add_subparsers(dest='algorithm', metavar='ALGORITHM')
    subparsers.required = True

    fcfs = subparsers.add_parser('fcfs', parents=[common], help=ALGORITHMS['fcfs']['name'])
    fcfs.add_argument('bursts', nargs='*', metavar='burst', help='CPU burst times')

    rr = subparsers.add_parser('rr', parents=[common], help=ALGORITHMS['rr']['name'])
    rr.add_argument('quantum', help='time quantum')
    rr.add_argument('bursts', nargs='*', metavar='burst', help='CPU burst times')

    compare = subparsers.add_parser('compare', parents=[common],
                                    help='run every algorithm on the same bursts')
    compare.add_argument('-q', '--quantum', default=str(config.default_quantum),
                         help=f'Round Robin time quantum (default: {config.default_quantum})')
    compare.add_argument('bursts', nargs='*', metavar='burst', help='CPU burst times')

    return parser


def load_bursts(args) -> List[int]:
    """명령행 또는 파일에서 버스트 목록 읽기"""
    if args.file:
        if args.bursts:
            raise InvalidInput("Give burst times either on the command line or with --file, not both")
        return InputParser.parse_file(args.file)
    return InputParser.parse_bursts(args.bursts)


def print_result(result: Dict, visualizer: Visualizer):
    """단일 알고리즘 결과 출력"""
    table = result['table']
    visualizer.print_process_table(table)
    print(f"Total time: {result['total_time']}")
    print(f"Average wait time: {table.average_wait():.2f}")


def safe_filename(algo_name: str) -> str:
    """알고리즘 이름을 파일명으로 변환"""
    safe_algo = re.sub(r'[^A-Za-z0-9]+', '_', algo_name)
    return safe_algo.strip('_')


def save_results(results: List[Dict], output_dir: str, visualizer: Visualizer):
    """Gantt 차트, 비교 차트, 결과 텍스트 저장"""
    os.makedirs(output_dir, exist_ok=True)

    for result in results:
        save_path = os.path.join(output_dir, f"gantt_{safe_filename(result['algorithm'])}.png")
        visualizer.draw_gantt_chart(result['gantt_chart'], result['algorithm'],
                                    save_path=save_path, show=False)

    # 비교 그래프 (2개 이상일 때만)
    if len(results) > 1:
        visualizer.compare_algorithms(results, save_path=os.path.join(output_dir, "comparison.png"),
                                      show=False)

    save_results_to_file(results, os.path.join(output_dir, "results.txt"), visualizer)
    print(f"Results saved to '{output_dir}/'")


def save_results_to_file(results: List[Dict], filename: str, visualizer: Visualizer):
    """결과를 텍스트 파일로 저장"""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write("Burst Scheduler Simulation Results\n")
        f.write(visualizer.format_statistics_table(results) + "\n\n")

        for result in results:
            f.write(f"Algorithm: {result['algorithm']}\n")
            f.write(visualizer.format_process_table(result['table']) + "\n")
            f.write(f"Total time: {result['total_time']}\n")
            f.write(f"Average wait time: {result['table'].average_wait():.2f}\n\n")

    logger.info("Results written to %s", filename)


def run(args, config: SimulatorConfig) -> int:
    """파싱된 인자로 시뮬레이션 실행"""
    quantum: Optional[int] = None
    if args.algorithm in ('rr', 'compare'):
        quantum = InputParser.parse_quantum(args.quantum)

    bursts = load_bursts(args)
    visualizer = Visualizer()

    if args.algorithm == 'fcfs':
        print("Using FCFS")
    elif args.algorithm == 'rr':
        print(f"Using RR({quantum})")
    else:
        print(f"Comparing FCFS and RR({quantum})")

    for i, burst in enumerate(bursts):
        print(f"Accepted P{i}: Burst {burst}")

    algorithms = list(ALGORITHMS) if args.algorithm == 'compare' else [args.algorithm]
    results = []
    for algorithm in algorithms:
        result = run_scheduler(algorithm, bursts, quantum, verbose=args.verbose)
        if len(algorithms) > 1:
            print(f"\n[{result['algorithm']}]")
        print_result(result, visualizer)
        results.append(result)

    if len(results) > 1:
        print()
        visualizer.print_statistics_table(results)

    if args.save:
        save_results(results, args.save, visualizer)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    try:
        config = SimulatorConfig.from_env()
    except SchedulerError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    args = build_parser(config).parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        return run(args, config)
    except SchedulerError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user.", file=sys.stderr)
        sys.exit(130)
