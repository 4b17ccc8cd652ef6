#!/usr/bin/env python3
"""
Catalog Browser Entry Point

This script provides a simple entry point for the Catalog Browser tool.
All application logic is contained in the catalog_browser.libs.main_app module.
"""

import sys
from pathlib import Path

# Make the catalog_browser package importable when run from a source checkout
sys.path.insert(0, str(Path(__file__).parent))

# Logging will be configured by main_app.main()

if __name__ == "__main__":
    try:
        from catalog_browser.libs.main_app import main
    except ImportError as e:
        print(f"Error importing main application: {e}", file=sys.stderr)
        print("Please ensure the dependencies are installed: pip install -e .", file=sys.stderr)
        sys.exit(1)
    main()
