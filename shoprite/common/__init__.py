# Common utilities
from .config_loader import Settings, build_settings, load_config, load_settings
from .log_config import setup_logging
from .text_utils import parse_leading_int
