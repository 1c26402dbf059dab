"""
Logging utilities for the rock-paper-scissors gesture classifier.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any, Iterable
from datetime import datetime
import json


class Logger:
    """Logging wrapper with console, file and JSON-lines outputs."""

    def __init__(
        self,
        name: str = "rps_gesture",
        log_dir: str = "logs",
        level: str = "INFO",
        console_output: bool = True,
        file_output: bool = True,
        json_output: bool = False
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            log_dir: Directory for log files
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console_output: Enable console output
            file_output: Enable file output
            json_output: Enable JSON formatted output
        """
        self.name = name
        self.log_dir = Path(log_dir)
        if file_output or json_output:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        # Create logger
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Clear existing handlers
        self.logger.handlers.clear()

        # Create formatters
        self.console_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        self.file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.json_handler = None

        # Console handler
        if console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(self.console_formatter)
            self.logger.addHandler(console_handler)

        # File handler
        if file_output:
            log_file = self.log_dir / f"{name}_{timestamp}.log"
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(self.file_formatter)
            self.logger.addHandler(file_handler)

        # JSON handler for structured logging
        if json_output:
            json_file = self.log_dir / f"{name}_{timestamp}.json"
            self.json_handler = JsonFileHandler(json_file)
            self.logger.addHandler(self.json_handler)

    @classmethod
    def from_config(cls, name: str, config: Optional[Dict[str, Any]] = None) -> "Logger":
        """
        Create a logger from the ``logging`` section of a configuration.

        Args:
            name: Logger name
            config: Mapping with optional level, log_dir and *_output keys

        Returns:
            Configured Logger
        """
        config = config or {}
        return cls(
            name=name,
            log_dir=config.get('log_dir', "logs"),
            level=config.get('level', "INFO"),
            console_output=config.get('console_output', True),
            file_output=config.get('file_output', False),
            json_output=config.get('json_output', False)
        )

    def is_enabled_for(self, level: str) -> bool:
        """Check whether messages at the given level would be emitted."""
        return self.logger.isEnabledFor(getattr(logging, level.upper()))

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.logger.error(message, extra=kwargs)

    def critical(self, message: str, **kwargs) -> None:
        """Log critical message."""
        self.logger.critical(message, extra=kwargs)

    def log_config(self, config: Dict[str, Any]) -> None:
        """Log configuration parameters."""
        self.info("Configuration loaded", config=config)

    def log_finger_states(self, states: Iterable[Any]) -> None:
        """
        Log each finger's bend state at debug level.

        Args:
            states: (finger, state) pairs; a None state means tip and PIP
                are equally far from the wrist
        """
        for finger, state in states:
            finger_name = getattr(finger, 'value', finger)
            state_name = getattr(state, 'value', state) if state is not None else "level"
            self.debug(f"{finger_name}: {state_name}", finger=finger_name, finger_state=state_name)

    def log_gesture(self, gesture: Any, missing: Iterable[Any] = ()) -> None:
        """Log a classified gesture at debug level."""
        gesture_name = getattr(gesture, 'value', gesture)
        missing_names = [getattr(m, 'value', m) for m in missing]
        if missing_names:
            self.debug(
                f"Gesture: {gesture_name} (missing joints: {', '.join(missing_names)})",
                gesture=gesture_name,
                missing_joints=missing_names
            )
        else:
            self.debug(f"Gesture: {gesture_name}", gesture=gesture_name)


class JsonFileHandler(logging.Handler):
    """Custom handler for JSON formatted logs."""

    # LogRecord internals that are not useful in the JSON output
    _SKIPPED_FIELDS = {'args', 'msg', 'exc_info', 'exc_text', 'stack_info'}

    def __init__(self, filename: str):
        super().__init__()
        self.filename = filename

    def emit(self, record):
        """Emit a log record in JSON format."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in log_entry and key not in self._SKIPPED_FIELDS:
                log_entry[key] = value

        # Write to file
        with open(self.filename, 'a') as f:
            f.write(json.dumps(log_entry, default=str) + '\n')
