import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# info is the normal level, debug the verbose one
def setup_logger(name: str = "ninja_trace", verbose: bool = False) -> logging.Logger:
  level = logging.DEBUG if verbose else logging.INFO
  logger = logging.getLogger(name)
  logger.setLevel(level)

  if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

  for handler in logger.handlers:
    handler.setLevel(level)

  return logger
