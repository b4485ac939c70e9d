# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening src/tasklark/config.py.
"""

ENV_VARS = {
    # App / logging
    "TASKLARK_APP_NAME": "Assistant display name used in the greeting (default: lark).",
    "TASKLARK_LOG_LEVEL": "Console (stderr) logging level (default: WARNING). The log file is always DEBUG.",
    # Paths (gitignored)
    "TASKLARK_DATA_DIR": "Local data directory (default: .local/tasklark).",
    "TASKLARK_TASKS_PATH": "Save file with one task per line (default: <data_dir>/tasks.txt).",
    "TASKLARK_LOG_DIR": "Directory for tasklark.log (default: <data_dir>).",
    # Startup
    "TASKLARK_AUTO_CREATE_STORE": (
        "Create a missing save file without asking (true/false, default: false)."
    ),
}
