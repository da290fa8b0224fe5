"""
Smart Event Manager launcher.
Run this file to open the event console.
Make sure you have run 'python scripts/setup.py' at least once.
"""

import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from event_manager.app import main

if __name__ == "__main__":
    sys.exit(main())
