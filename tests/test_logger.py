import json
import logging

from rps_gesture.core.classifier import FingerState, Gesture
from rps_gesture.core.joints import Finger, JointName
from rps_gesture.utils.logger import Logger


def test_no_log_dir_without_file_outputs(tmp_path):
    log_dir = tmp_path / "logs"
    Logger(name="rps_no_files", log_dir=str(log_dir), console_output=False, file_output=False)
    assert not log_dir.exists()


def test_file_output(tmp_path):
    logger = Logger(name="rps_file", log_dir=str(tmp_path), console_output=False)
    logger.info("hello")
    for handler in logger.logger.handlers:
        handler.flush()

    (log_file,) = tmp_path.glob("rps_file_*.log")
    assert "hello" in log_file.read_text()


def test_json_output_carries_extra_fields(tmp_path):
    logger = Logger(
        name="rps_json",
        log_dir=str(tmp_path),
        level="DEBUG",
        console_output=False,
        file_output=False,
        json_output=True
    )
    logger.log_gesture(Gesture.ROCK, [JointName.WRIST])

    (json_file,) = tmp_path.glob("rps_json_*.json")
    entry = json.loads(json_file.read_text().splitlines()[0])
    assert entry["level"] == "DEBUG"
    assert entry["gesture"] == "rock"
    assert entry["missing_joints"] == ["wrist"]
    assert entry["message"] == "Gesture: rock (missing joints: wrist)"


def test_log_finger_states(quiet_logger, caplog):
    caplog.set_level(logging.DEBUG, logger=quiet_logger.name)
    quiet_logger.log_finger_states([
        (Finger.INDEX, FingerState.STRAIGHT),
        (Finger.LITTLE, None),
    ])
    assert [r.getMessage() for r in caplog.records] == ["index: straight", "little: level"]
    assert caplog.records[0].finger_state == "straight"


def test_level_filtering(caplog):
    logger = Logger(name="rps_levels", level="WARNING", console_output=False, file_output=False)
    caplog.set_level(logging.DEBUG)
    logger.info("dropped")
    logger.warning("kept")
    assert [r.getMessage() for r in caplog.records] == ["kept"]
    assert logger.is_enabled_for("error")
    assert not logger.is_enabled_for("debug")


def test_from_config_defaults(tmp_path):
    logger = Logger.from_config("rps_from_config", {"log_dir": str(tmp_path / "x"), "console_output": False})
    assert logger.logger.handlers == []
    assert logger.is_enabled_for("INFO")
    assert not (tmp_path / "x").exists()
