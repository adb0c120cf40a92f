# Test configuration
import os
import sys
from pathlib import Path

from hypothesis import Verbosity, settings

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

# Keep test runs from writing logs/error.log and logs/combined.log
os.environ["LOG_TO_FILE"] = "false"

# Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))
