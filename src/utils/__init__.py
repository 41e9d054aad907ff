"""
Utility modules: logging, configuration loading, statistics.
"""
from src.utils.config_loader import Configuration, load_config
from src.utils.logging import get_logger, setup_logging
from src.utils.statistics import StatisticsReporter

__all__ = ["setup_logging", "get_logger", "Configuration", "load_config", "StatisticsReporter"]
