from .core import (Session, create_session, run_round, run_batch,
                   ACTIVE, SOLVED, BUDGET_EXCEEDED, EXHAUSTED)
from .channel import ConsoleChannel, ScriptedChannel, OracleChannel
from .modes import MODES, Mode, get_mode, menu_modes
from .io import GuessLog, write_csv, write_manifest, summarize

__all__ = [
    "Session", "create_session", "run_round", "run_batch",
    "ACTIVE", "SOLVED", "BUDGET_EXCEEDED", "EXHAUSTED",
    "ConsoleChannel", "ScriptedChannel", "OracleChannel",
    "MODES", "Mode", "get_mode", "menu_modes",
    "GuessLog", "write_csv", "write_manifest", "summarize",
]
