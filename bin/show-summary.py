"""Print the share summary of the saved game.

Usage: uv run python bin/show-summary.py

Reads the save file configured by TALLY_SAVE_PATH. Exits with status 1
when no game has been saved (or the save is unreadable).
"""

import sys
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from tally.app import create_score_keeper


def main() -> None:
    store = create_score_keeper()
    if store.current is None:
        print("No saved game.")
        sys.exit(1)
    print(store.summary())


if __name__ == "__main__":
    main()
