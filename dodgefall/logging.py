"""
Dodgefall Logging

Two channels:

    Console loggers, one per module, printing ``[module] LEVEL: message``
    when the message is at or above that module's level.

    Structured records (dicts) for session events, routed to the sink
    registered for their module. FileSink appends JSONL, NullSink drops.

Usage:
    from dodgefall.logging import get_logger, emit_record

    log = get_logger('session')
    log.info("Session %d started", 1)
    emit_record('session', {'type': 'game_over', 'final_score': 12})

Environment:
    DODGEFALL_LOG_LEVEL=DEBUG                # default console level
    DODGEFALL_LOG_SPAWNER=TRACE              # per-module console level
    DODGEFALL_LOG_DIR=/tmp/dodgefall         # where FileSink writes
    DODGEFALL_LOGGING_SESSION_ENABLED=true   # write session records to disk
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


LEVEL_PREFIX = 'DODGEFALL_LOG_'
RECORDS_PREFIX = 'DODGEFALL_LOGGING_'
RECORDS_SUFFIX = '_ENABLED'


class LogLevel(IntEnum):
    """Console levels, numbered as in the stdlib logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


_TAGS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
    'records': set(),        # modules whose records go to disk
}


def _parse_level(name: str) -> LogLevel:
    name = name.strip().upper()
    if name == 'WARN':
        name = 'WARNING'
    return LogLevel.__members__.get(name, LogLevel.INFO)


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# =============================================================================
# Structured records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one JSON-serializable record for a module."""

    @abstractmethod
    def close(self) -> None:
        """Release anything the sink holds open."""


class NullSink(LogSink):
    """Accepts records and discards them."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


class FileSink(LogSink):
    """Appends records to ``<session_name>_<module>.jsonl``.

    A header line is written when a module's file is first opened and a
    footer line when the sink is closed. Records without a ``wall_time``
    get one.
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def _open(self, module: str) -> TextIO:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)

        handle = open(self._log_dir / f"{self._session_name}_{module}.jsonl", 'a')
        self._write(handle, {
            'type': 'header',
            'module': module,
            'session_name': self._session_name,
            'start_time': time.time(),
        })
        return handle

    @staticmethod
    def _write(handle: TextIO, record: Dict[str, Any]) -> None:
        handle.write(json.dumps(record) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        if module not in self._files:
            self._files[module] = self._open(module)
        self._write(self._files[module], {'wall_time': time.time(), **record})

    def close(self) -> None:
        for module, handle in self._files.items():
            self._write(handle, {'type': 'footer', 'module': module, 'end_time': time.time()})
            handle.close()
        self._files.clear()


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route a module's records to ``sink``, replacing any earlier one."""
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send a record to the module's sink.

    Returns:
        False when no sink is registered for the module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def records_enabled(module: str) -> bool:
    """Whether DODGEFALL_LOGGING_<MODULE>_ENABLED switched on disk records."""
    return module.lower() in _config['records']


def create_sink_for_module(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if records are enabled for the module, else NullSink."""
    if not records_enabled(module):
        return NullSink()
    return FileSink(session_name=session_name)


def get_log_dir() -> str:
    """Directory for record files.

    configure_logging(log_dir=...) wins, then DODGEFALL_LOG_DIR, then the
    platform's per-user data directory.
    """
    configured = _config['log_dir'] or os.environ.get('DODGEFALL_LOG_DIR')
    if configured:
        return str(Path(configured).expanduser())

    if sys.platform == 'darwin':
        base = Path.home() / 'Library' / 'Application Support' / 'Dodgefall'
    elif sys.platform == 'win32':
        base = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Dodgefall'
    else:
        base = Path(os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))) / 'dodgefall'
    return str(base / 'logs')


# =============================================================================
# Configuration
# =============================================================================

def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Set console levels and the record directory.

    Args:
        level: Default level for every module
        modules: Per-module level overrides
        log_dir: Directory for FileSink output
    """
    _config['default_level'] = _parse_level(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module.lower()] = _parse_level(module_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def disable_logging() -> None:
    """Silence every console logger."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()


def _load_env_config() -> None:
    """Read DODGEFALL_LOG_* levels and DODGEFALL_LOGGING_*_ENABLED switches."""
    for key, value in os.environ.items():
        if key.startswith(RECORDS_PREFIX):
            if key.endswith(RECORDS_SUFFIX):
                module = key[len(RECORDS_PREFIX):-len(RECORDS_SUFFIX)].lower()
                if _is_truthy(value):
                    _config['records'].add(module)
                else:
                    _config['records'].discard(module)
        elif key == 'DODGEFALL_LOG_LEVEL':
            _config['default_level'] = _parse_level(value)
        elif key == 'DODGEFALL_LOG_DIR':
            _config['log_dir'] = value
        elif key.startswith(LEVEL_PREFIX):
            _config['module_levels'][key[len(LEVEL_PREFIX):].lower()] = _parse_level(value)


_load_env_config()


# =============================================================================
# Console loggers
# =============================================================================

class DodgefallLogger:
    """Printf-style console logger bound to one module name."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower()

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def log(self, level: LogLevel, msg: str, *args) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_TAGS[level]}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self.log(LogLevel.ERROR, msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> DodgefallLogger:
    """Cached logger for ``module``."""
    return DodgefallLogger(module)
