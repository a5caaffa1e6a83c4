"""
Логгер, выводящий сообщения в консоль.
"""

import json
import sys
from typing import Any, TextIO

from front_desk.application import interfaces as ports


class ConsoleLogger(ports.ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, verbose: bool = False):
        self._verbose = verbose

    def _write(self, level: str, message: str, stream: TextIO, **kwargs: Any) -> None:
        print(f"[{level}] {message}", file=stream, flush=True)
        if kwargs:
            print(
                "  Context:",
                json.dumps(kwargs, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )

    def info(self, message: str, **kwargs: Any) -> None:
        self._write("INFO", message, sys.stdout, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._write("ERROR", message, sys.stderr, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._write("WARNING", message, sys.stderr, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        if self._verbose:
            self._write("DEBUG", message, sys.stdout, **kwargs)
