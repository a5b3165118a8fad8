import os

from ledger_journal.common.core.logging_config import setup_logging as common_setup_logging


def setup_logging(config_path: str = None):
    """
    Load the YAML config and initialize logging.
    """
    if config_path is None:
        config_path = os.getenv("LOG_CONFIG_PATH", "config/journal_log.yaml")
    common_setup_logging(config_path)
