"""Local configuration for mdbook-compile-output."""

from __future__ import annotations

import os
import shlex
from pathlib import Path


PREPROCESSOR_NAME = "compile-output"
MARKER_PREFIX = "{{#compile_output:"
MARKER_SUFFIX = "}}"

DEFAULT_STAGES_DIR = "rust_stages"
DEFAULT_STEP_COMMAND = "cargo test --release"
DEFAULT_LOG_LEVEL = "WARNING"

# Relative paths are resolved against the working directory mdBook launches us from.
COMPILE_OUTPUT_STAGES_DIR = Path(os.getenv("COMPILE_OUTPUT_STAGES_DIR", DEFAULT_STAGES_DIR)).expanduser()
COMPILE_OUTPUT_COMMAND = tuple(shlex.split(os.getenv("COMPILE_OUTPUT_COMMAND", DEFAULT_STEP_COMMAND)))
COMPILE_OUTPUT_LOG_LEVEL = os.getenv("COMPILE_OUTPUT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
