import logging
import sys
from pathlib import Path


def setup_logging(level: int = logging.INFO, log_file: str | None = None):
    """
    Настраивает глобальный логгер для генератора.
    - Устанавливает формат сообщений.
    - Выводит логи в консоль (stderr, чтобы не смешивать с превью в stdout).
    - Если задан log_file, дублирует логи в файл.
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # убирает старые хендлеры, чтобы не было дублей
    )

    # детальные логи только нашего пакета, остальное приглушим
    logging.getLogger("noise_engine").setLevel(level)
    logging.getLogger("numba").setLevel(logging.WARNING)
