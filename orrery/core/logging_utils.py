from __future__ import annotations

import logging
from typing import Optional


def get_logger(name: str = "orrery", logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    Return a logger for orrery code.

    - If a logger is provided, use it.
    - Otherwise create/use the logger called ``name``.
    - If neither it nor the root logger has handlers, attach a StreamHandler
      with a compact formatter and default the level to INFO.
    """
    if logger is not None:
        return logger
    lg = logging.getLogger(name)
    if not lg.handlers and not logging.getLogger().handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        lg.addHandler(h)
        lg.setLevel(logging.INFO)
    return lg
