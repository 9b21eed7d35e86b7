"""Entry point for running atlas-e2e as a module.

Usage:
    python -m atlas_e2e login
    python -m atlas_e2e probe --headed
"""

from atlas_e2e.cli import main

if __name__ == "__main__":
    main()
