from .core import run_case, run_batch
from .io import write_csv, write_manifest
from .reader import ConsoleReader, ScriptedReader, InputStreamError
from .solve import SolveSession, run_solve
from .play import PlayGame, PlayStatus, run_play, MAX_TURNS

__all__ = ["run_case", "run_batch", "write_csv", "write_manifest",
           "ConsoleReader", "ScriptedReader", "InputStreamError",
           "SolveSession", "run_solve", "PlayGame", "PlayStatus", "run_play", "MAX_TURNS"]
