import logging
from pathlib import Path
from typing import Optional

# 로그 출력 형식
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    루트 로거에 콘솔 핸들러(+ 선택적으로 파일 핸들러)를 붙인다.
    이미 핸들러가 있으면 아무것도 하지 않음 (테스트, create_app 재호출 대비)
    """
    root = logging.getLogger()
    if root.handlers:
        return

    # 알 수 없는 레벨 이름은 INFO 로 처리
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # 콘솔 출력
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    # 파일 출력 (LOG_FILE 설정 시)
    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
