import sys
import os
import tempfile

# Add project root to sys.path so tests can import top-level modules like 'transforms', 'models', 'importers', etc.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Keep test log files out of the working tree
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='clickup_import_logs_'))
