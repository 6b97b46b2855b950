#!/usr/bin/env python3
"""
Sample Statistics — Analysis Script
===================================
Thin entry-point. All logic lives in src.analyzer.

Usage:
  From a file:   python3 analyze_sample.py data.txt
  From stdin:    cat data.txt | python3 analyze_sample.py
  Scott's rule:  python3 analyze_sample.py data.json --rule scott --plot hist.png
  Trimmed:       python3 analyze_sample.py data.txt --trim 2 2
"""

from src.analyzer.cli import main

if __name__ == "__main__":
    main()
