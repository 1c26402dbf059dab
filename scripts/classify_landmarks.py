#!/usr/bin/env python3
"""
Classify recorded hand landmark files as rock, paper, scissors or unknown.
"""

import sys
import json
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rps_gesture.core.classifier import GestureClassifier
from rps_gesture.data.landmark_files import load_observations
from rps_gesture.utils.config import ConfigManager, MISSING_JOINT_POLICIES
from rps_gesture.utils.logger import Logger


def run_classification(
    files: List[str],
    config_path: Optional[str] = None,
    missing_joints: Optional[str] = None,
    output_path: Optional[str] = None,
    verbose: bool = False
) -> Dict[str, Any]:
    """
    Classify the first hand in each landmark file.

    Args:
        files: Paths to landmark JSON files
        config_path: Path to configuration file (optional)
        missing_joints: Override the missing-joint policy (optional)
        output_path: Path to save a JSON summary (optional)
        verbose: Log per-finger states

    Returns:
        Dictionary with per-file results and failure count

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    # Load configuration
    if config_path:
        config_manager = ConfigManager(str(Path(config_path).parent))
        config = config_manager.load_with_defaults(Path(config_path).stem, "classifier")
    else:
        config = ConfigManager().load_or_default("classifier")

    if missing_joints is not None:
        config['classifier']['missing_joints'] = missing_joints
    if verbose:
        config['logging']['level'] = "DEBUG"

    logger = Logger.from_config("landmark_classification", config['logging'])
    logger.log_config(config)

    classifier = GestureClassifier(config, logger)

    results = {
        "files": [],
        "failed": 0
    }

    for file_path in files:
        entry = {"path": file_path, "gesture": None, "success": False}

        try:
            observations = load_observations(file_path)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Could not read {file_path}: {e}")
            entry["error"] = str(e)
            results["failed"] += 1
            results["files"].append(entry)
            continue

        result = classifier.classify_observations(observations)
        if result is None:
            logger.info(f"No hand recorded in {file_path}")
        else:
            entry["gesture"] = result.gesture.value
            entry["fingers"] = {
                reading.finger.value: reading.state.value if reading.state else None
                for reading in result.fingers
            }
            entry["missing_joints"] = [name.value for name in result.missing_joints]
            logger.info(f"{file_path}: {result.gesture.value}")

        entry["success"] = True
        results["files"].append(entry)

    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding="utf-8") as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
        logger.info(f"Results saved to: {output_path}")

    return results


def main():
    """Main function for landmark file classification."""
    parser = argparse.ArgumentParser(description="Classify hand landmark files as rock/paper/scissors")
    parser.add_argument(
        "files",
        nargs="+",
        help="Landmark JSON files"
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--missing-joints",
        choices=MISSING_JOINT_POLICIES,
        help="How to read joints the pose estimator did not locate"
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Path to save results as JSON"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args()

    # Check if config exists
    if args.config and not Path(args.config).exists():
        print(f"Error: Configuration file not found: {args.config}")
        return 1

    results = run_classification(
        files=args.files,
        config_path=args.config,
        missing_joints=args.missing_joints,
        output_path=args.output,
        verbose=args.verbose
    )

    for entry in results["files"]:
        if entry["success"]:
            print(f"{entry['path']}: {entry['gesture'] or 'no hand'}")
        else:
            print(f"{entry['path']}: error: {entry['error']}")

    return 1 if results["failed"] else 0


if __name__ == "__main__":
    sys.exit(main())
