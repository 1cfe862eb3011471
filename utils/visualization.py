"""
시각화 모듈: 결과 표, Gantt Chart 및 비교 그래프 생성
"""

import logging
from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from core.process import ProcessTable, ProcessState
from core.scheduler_base import GanttEntry

logger = logging.getLogger(__name__)


class Visualizer:
    """스케줄링 결과 시각화"""

    def __init__(self):
        # 프로세스별 색상 설정
        self.colors = plt.cm.Set3.colors

    @staticmethod
    def format_process_table(table: ProcessTable) -> str:
        """PID / 남은 버스트 / 대기 시간 표 문자열"""
        lines = ["PID\tBurst Left\tWait"]
        for p in table:
            lines.append(f"{p.pid}\t{p.burst_remaining}\t\t{p.wait}")
        return "\n".join(lines)

    def print_process_table(self, table: ProcessTable):
        print(self.format_process_table(table))

    def draw_gantt_chart(self, gantt_data: List[GanttEntry], algorithm_name: str,
                         save_path: Optional[str] = None, show: bool = True) -> bool:
        """
        Gantt Chart 그리기

        Args:
            gantt_data: Gantt Chart 데이터
            algorithm_name: 알고리즘 이름
            save_path: 저장 경로 (None이면 저장 안 함)
            show: 화면에 표시할지 여부

        Returns:
            차트를 그렸는지 여부 (데이터가 없으면 False)
        """
        if not gantt_data:
            logger.warning("No Gantt chart data for %s", algorithm_name)
            return False

        fig, ax = plt.subplots(figsize=(16, 6))

        unique_pids = sorted(set(entry.pid for entry in gantt_data))
        pid_to_y = {pid: idx for idx, pid in enumerate(unique_pids)}

        for entry in gantt_data:
            duration = entry.end_time - entry.start_time
            y_pos = pid_to_y[entry.pid]
            color = self.colors[entry.pid % len(self.colors)]
            alpha = 1.0 if entry.state == ProcessState.RUNNING else 0.5

            ax.barh(y_pos, duration, left=entry.start_time, height=0.8,
                    color=color, alpha=alpha, edgecolor='black', linewidth=0.5)

            # 충분히 긴 구간만 텍스트 표시
            if duration > 1:
                ax.text(entry.start_time + duration / 2, y_pos, f'P{entry.pid}',
                        ha='center', va='center', fontsize=8, fontweight='bold')

        ax.set_yticks(range(len(unique_pids)))
        ax.set_yticklabels([f'P{pid}' for pid in unique_pids])
        ax.set_xlabel('Time', fontsize=12)
        ax.set_ylabel('Process', fontsize=12)
        ax.set_title(f'Gantt Chart - {algorithm_name}', fontsize=14, fontweight='bold')
        ax.grid(axis='x', alpha=0.3)
        ax.legend(handles=[mpatches.Patch(color=self.colors[0], label='Running')],
                  loc='upper right')

        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
            logger.info("Gantt chart saved to %s", save_path)

        if show:
            plt.show()
        else:
            plt.close(fig)
        return True

    def compare_algorithms(self, results: List[Dict], save_path: Optional[str] = None,
                           show: bool = True) -> bool:
        """
        여러 알고리즘의 성능 비교 그래프

        Args:
            results: 각 알고리즘의 결과 리스트
            save_path: 저장 경로
            show: 화면에 표시할지 여부
        """
        if not results:
            logger.warning("No results to compare")
            return False

        algorithms = [r['algorithm'] for r in results]
        panels = [
            ('avg_waiting_time', 'Average Waiting Time', 'skyblue', '{:.2f}'),
            ('avg_turnaround_time', 'Average Turnaround Time', 'lightcoral', '{:.2f}'),
            ('total_time', 'Total Time', 'lightgreen', '{:.0f}'),
            ('context_switches', 'Context Switches', 'plum', '{:.0f}'),
        ]

        fig, axes = plt.subplots(2, 2, figsize=(14, 10))
        fig.suptitle('Scheduling Algorithms Performance Comparison',
                     fontsize=16, fontweight='bold')

        for ax, (key, label, color, fmt) in zip(axes.flat, panels):
            values = [r['statistics'][key] for r in results]
            bars = ax.bar(range(len(algorithms)), values, color=color, edgecolor='black')
            ax.set_xticks(range(len(algorithms)))
            ax.set_xticklabels(algorithms, rotation=30, ha='right', fontsize=9)
            ax.set_ylabel(label, fontsize=11)
            ax.set_title(f'{label} Comparison', fontsize=12, fontweight='bold')
            ax.grid(axis='y', alpha=0.3)

            for bar, value in zip(bars, values):
                ax.text(bar.get_x() + bar.get_width() / 2., bar.get_height(),
                        fmt.format(value), ha='center', va='bottom', fontsize=9)

        plt.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
            logger.info("Comparison chart saved to %s", save_path)

        if show:
            plt.show()
        else:
            plt.close(fig)
        return True

    @staticmethod
    def format_statistics_table(results: List[Dict]) -> str:
        """알고리즘별 통계 표 문자열"""
        lines = [
            "=" * 90,
            f"{'Algorithm':<24} {'Avg Wait':>12} {'Avg Turnaround':>16} "
            f"{'Total Time':>12} {'Switches':>10}",
            "-" * 90,
        ]
        for result in results:
            stats = result['statistics']
            lines.append(f"{result['algorithm']:<24} "
                         f"{stats['avg_waiting_time']:>12.2f} "
                         f"{stats['avg_turnaround_time']:>16.2f} "
                         f"{stats['total_time']:>12} "
                         f"{stats['context_switches']:>10}")
        lines.append("=" * 90)
        return "\n".join(lines)

    def print_statistics_table(self, results: List[Dict]):
        print(self.format_statistics_table(results))
