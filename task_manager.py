#!/usr/bin/env python3
"""
Task Tracker - keep track of to-dos, deadlines and events from the terminal

Usage:
    python task_manager.py             - Start an interactive session
    python task_manager.py run         - Same, with --data-dir / --no-save options
    python task_manager.py show        - Show the saved task list

Inside a session:
    todo <description>
    deadline <description> /by <YYYY-MM-DD>
    event <description> /at <YYYY-MM-DD>
    list, done <n>, delete <n>, find <text>, sort, help <command>, bye
"""

import sys
from config import Config
from core.cli_interface import cli


def main():
    """Main entry point"""
    try:
        try:
            Config.validate()
        except ValueError as e:
            print(f"Configuration error: {e}")
            sys.exit(1)

        cli()

    except KeyboardInterrupt:
        print("\n\nInterrupted")
        sys.exit(0)


if __name__ == '__main__':
    main()
