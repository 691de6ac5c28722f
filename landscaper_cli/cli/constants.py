# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from enum import IntEnum
from pathlib import Path

# ============================================================================
# Configuration Files
# ============================================================================

USER_CONFIG_DIR = Path.home() / ".landscaper-cli"
USER_CONFIG_FILE = "config.yaml"

# ============================================================================
# Environment Variables
# ============================================================================

ENV_PREFIX = "LANDSCAPER_CLI_"
ENV_CONFIG_FILE = "LANDSCAPER_CLI_CONFIG"

# ============================================================================
# CLI Names
# ============================================================================

CLI_NAME = "landscaper-cli"

# ============================================================================
# Exit Codes
# ============================================================================


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    USAGE = 2
    SOFTWARE = 70  # EX_SOFTWARE from BSD sysexits.h
    CONFIG = 78    # EX_CONFIG from BSD sysexits.h
    INTERRUPTED = 130  # Standard SIGINT exit code
