#!/usr/bin/env python3
"""
Code Review Assigner

Usage:
    python assign_reviews.py -i team.json
    python assign_reviews.py -i pools.json -m dual -f markdown -o docs/
"""

from review_assigner.main import main


if __name__ == "__main__":
    main()
