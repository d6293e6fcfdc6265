"""
__main__.py

Support running wallow as a python module (python -m wallow) instead of through the "wallow"
console script.
"""

from wallow.cli import main


if __name__ == "__main__":
    main()
