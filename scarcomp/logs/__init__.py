from .logger import get_logger
