#!/usr/bin/env python3
"""
CPE Candidate Tool Entry Point

Runs the candidate tool from the project root by putting the src directory on
the Python path.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from cpe_candidates.core.candidate_tool import main

if __name__ == "__main__":
    sys.exit(main())
