"""
웹 서버 실행 스크립트
백엔드 API 서버를 시작합니다.
"""

import logging

import uvicorn

from core.config import SimulatorConfig


def main():
    config = SimulatorConfig.from_env()
    logging.basicConfig(level=config.log_level)

    print("=" * 60)
    print("  Burst Scheduler Simulator - Web Server")
    print("=" * 60)
    print(f"API docs: http://localhost:{config.port}/docs")
    print("Press Ctrl+C to stop.")
    print("-" * 60)

    uvicorn.run("web.backend.app:app", host=config.host, port=config.port,
                log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
