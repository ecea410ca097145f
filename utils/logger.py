from loguru import logger
import os
import sys
from pathlib import Path

def enrich_record(record):
    # 计算相对路径
    file_path = Path(record["file"].path)
    try:
        relative_path = file_path.relative_to(Path.cwd())
    except ValueError:
        relative_path = file_path
    record["extra"]["rel_path"] = str(relative_path)
    return True

def configure_logger(level: str = ""):
    # cdk synth 把 stdout 当作输出，日志只写 stderr
    level = level or os.getenv("AIO_LOG_LEVEL", "INFO")
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSSSSS}</green> | <level>{level: <8}</level> | <cyan>{extra[rel_path]}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True,
        filter=enrich_record
    )
