#!/usr/bin/env python3
"""
Dev mode runner for ggrep

Watches for file changes and re-runs the test suite.

Usage:
  python dev.py            # watch ggrep/ and tests/
  python dev.py -k walker  # extra args are passed to pytest
"""
import subprocess
import sys
import time
from pathlib import Path
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler

WATCHED_DIRS = ("ggrep", "tests")


class PytestRerunHandler(FileSystemEventHandler):
    """Re-runs pytest on Python file changes."""

    def __init__(self, pytest_args=None):
        self.pytest_args = list(pytest_args or [])
        self.process = None
        self.run_tests()

    def run_tests(self):
        """Start a fresh pytest run, stopping any run still in progress."""
        if self.process and self.process.poll() is None:
            print("Stopping previous run...")
            self.process.terminate()
            self.process.wait()

        print("Running tests...")
        self.process = subprocess.Popen(
            [sys.executable, "-m", "pytest", "-q", *self.pytest_args],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            bufsize=1
        )
        print(f"pytest started (PID: {self.process.pid})")

    def on_modified(self, event):
        """Handle file modification events."""
        if event.src_path.endswith('.py'):
            print(f"\n{event.src_path} changed - re-running...")
            time.sleep(0.1)  # Debounce
            self.run_tests()

    def stop(self):
        """Stop the pytest process."""
        if self.process and self.process.poll() is None:
            self.process.terminate()
            self.process.wait()


def main():
    """Run tests on every change."""
    print("ggrep dev mode")
    print("Ctrl+C to stop\n")

    handler = PytestRerunHandler(sys.argv[1:])
    observer = Observer()
    for directory in WATCHED_DIRS:
        if Path(directory).is_dir():
            observer.schedule(handler, directory, recursive=True)
    observer.start()

    try:
        # Stream pytest output
        while True:
            if handler.process and handler.process.stdout:
                line = handler.process.stdout.readline()
                if line:
                    print(line, end='')
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\nStopping dev mode...")
        observer.stop()
        handler.stop()

    observer.join()


if __name__ == "__main__":
    main()
