#!/usr/bin/env python
"""
CLI wrapper for rendering npm audit JSON as an HTML report.
"""

import sys
from pathlib import Path

# Add project root to path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

# Import and run the main function from the module
if __name__ == "__main__":
    from audit_html.audit.cli import main

    sys.exit(main())
