#!/usr/bin/env python
"""
Entry point script for circlegrowth
"""
import sys
from circlegrowth.cli import main

if __name__ == "__main__":
    sys.exit(main())
