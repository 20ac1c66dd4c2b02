import sys
from pathlib import Path

# Add src to path to ensure photokml package is found
sys.path.append(str(Path(__file__).parent / "src"))

from photokml.cli import main

if __name__ == "__main__":
    sys.exit(main())
