#!/usr/bin/env python3
from __future__ import annotations

import sys

from tabpad.app import run_app

if __name__ == "__main__":
    sys.exit(run_app(sys.argv))
