import os
import threading
import multiprocessing
import config

_stage = None


def set_stage(stage):
    global _stage
    _stage = stage


def log(scope, msg, level="INFO"):
    if scope == "MAPGEN" and not getattr(config, "LOG_GENERATION", True):
        return
    if scope == "SESSION" and not getattr(config, "LOG_SESSION", True):
        return
    pid = os.getpid()
    proc = multiprocessing.current_process().name
    thread = threading.current_thread().name
    stage = _stage
    stage_tag = f" {stage}" if stage is not None else ""
    text = f"[{level}{stage_tag} pid{pid} proc{proc} thr{thread} {scope}] {msg}"
    use_color = getattr(config, "LOG_COLOR", True) and os.getenv("NO_COLOR") is None
    if use_color:
        if level in ("WARNING", "ERROR"):
            text = f"\x1b[31m{text}\x1b[0m"
        # Main process + main thread: default (no color).
        elif proc == "MainProcess" and thread != "MainThread":
            # Main process worker thread.
            text = f"\x1b[32m{text}\x1b[0m"
        elif proc != "MainProcess":
            # External process.
            text = f"\x1b[33m{text}\x1b[0m"
    print(text)
