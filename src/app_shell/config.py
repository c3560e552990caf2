import logging
import os
from pathlib import Path

from src.rules.models import LoggingRules, Rules

logger = logging.getLogger(__name__)


def configure_logging(rules: LoggingRules) -> None:
    """Configure root logging from the rules file."""
    logging.basicConfig(level=rules.level, format=rules.format, force=True)


def validate_ops_rules(rules: Rules, data_dir: Path) -> None:
    """
    Validate operational requirements before startup.

    Raises RuntimeError listing everything that is missing.
    """
    ops = rules.ops
    problems = []

    # 1. Data dir must exist or be creatable
    if ops.data_dir_required:
        try:
            data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            problems.append(f"Data directory {data_dir} is not usable: {e}")
        else:
            if not os.access(data_dir, os.W_OK):
                problems.append(f"Data directory {data_dir} is not writable")

    # 2. Check Required Env
    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        problems.append(f"Missing required environment variables: {', '.join(missing)}")

    if problems:
        raise RuntimeError("; ".join(problems))

    logger.info("Configuration Validated.")
