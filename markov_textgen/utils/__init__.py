from .config_manager import Config
from .logger_utils import Log
from .metrics_tracker import Metrics

__all__ = ["Config", "Log", "Metrics"]
