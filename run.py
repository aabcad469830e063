#!/usr/bin/env python3
"""Run the complete preview image and site build pipeline."""

import subprocess
import sys


def run_command(cmd):
    """Run a command and exit on failure."""
    print(f"Running: {cmd}")
    result = subprocess.run(cmd, shell=True)
    if result.returncode != 0:
        print(f"Failed: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    posts_file = sys.argv[1] if len(sys.argv) > 1 else "posts.json"

    # Render Open Graph images into src/assets/<slug>/
    run_command(f"{sys.executable} -m src.og.generate {posts_file}")

    # Build index page, feed and passthrough assets
    run_command(f"{sys.executable} -m src.site.build {posts_file}")

    print("\n✅ Pipeline complete!")
