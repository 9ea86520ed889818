from .environment import Environment, configure_logging, init_environment, load_environment
from .general import GeneralUtils, read_json_file, save_json_file, sleep, stringify

__all__ = [
    "Environment",
    "configure_logging",
    "init_environment",
    "load_environment",
    "GeneralUtils",
    "read_json_file",
    "save_json_file",
    "sleep",
    "stringify",
]
