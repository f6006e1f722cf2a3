"""
Logging setup and small shared helpers
"""
import sys
import os
import logging
from datetime import datetime

from config import LOG_DIR, CONSOLE_LOG_LEVEL

# Configure Windows console for UTF-8 encoding to handle special characters
if sys.platform == 'win32':
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8')
    if hasattr(sys.stderr, 'reconfigure'):
        sys.stderr.reconfigure(encoding='utf-8')

# Create logs directory if it doesn't exist
if not os.path.exists(LOG_DIR):
    os.makedirs(LOG_DIR)

log_filename = os.path.join(LOG_DIR, f'import_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log')

# File handler captures everything, console only what CONSOLE_LOG_LEVEL allows
file_handler = logging.FileHandler(log_filename, encoding='utf-8')
file_handler.setLevel(logging.DEBUG)

console_handler = logging.StreamHandler()
console_handler.setLevel(CONSOLE_LOG_LEVEL)

formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
file_handler.setFormatter(formatter)
console_handler.setFormatter(formatter)

logging.basicConfig(
    level=logging.DEBUG,
    handlers=[file_handler, console_handler]
)
logger = logging.getLogger(__name__)


def log_banner(title: str, char: str = '=', width: int = 60):
    """Log a section banner, e.g. at the start of each import phase"""
    logger.info(char * width)
    logger.info(title)
    logger.info(char * width)
