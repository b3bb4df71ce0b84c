# main.py
import sys

from pathviz.app.cli import main

if __name__ == "__main__":
    sys.exit(main())
