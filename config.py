"""
Configuration and constants for ClickUp CSV import
"""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Importer metadata shown by the surrounding tool
IMPORTER_NAME = 'ClickUp (CSV)'
DEFAULT_TEAM_NAME = 'ClickUp'

# Default export file used when no path is given on the command line
CLICKUP_CSV_PATH = os.getenv('CLICKUP_CSV_PATH', '')

# Where transformed results are written
OUTPUT_DIR = os.getenv('OUTPUT_DIR', 'output')

# Logging configuration
# Console log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_DIR = os.getenv('LOG_DIR', 'logs')
CONSOLE_LOG_LEVEL = getattr(logging, os.getenv('CONSOLE_LOG_LEVEL', 'WARNING').upper(), logging.WARNING)

# ClickUp stores time estimates in milliseconds; the target scale is 0-64
ESTIMATE_DIVISOR = 112500
MAX_ESTIMATE = 64

# ClickUp priority codes: 1 (Urgent), 2 (High), 3 (Normal), 4 (Low), empty (No priority)
PRIORITY_MAPPING = {
    '1': 1,  # Urgent
    '2': 2,  # High
    '3': 3,  # Normal
    '4': 4,  # Low
}
