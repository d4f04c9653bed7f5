#!/usr/bin/env python3
"""
GitHub Repository Search

Main entry point for the repository search tool.
"""

from repo_search.cli import main

if __name__ == '__main__':
    main()
