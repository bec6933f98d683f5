# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKKEEPER_APP_NAME": "App display name shown in the banner (default: taskkeeper).",
    "TASKKEEPER_LOG_LEVEL": "Console logging level (default: WARNING; the log file is always DEBUG).",
    "TASKKEEPER_LOG_DIR": "Directory for taskkeeper.log (default: <data_dir>/.taskkeeper).",
    # Data files
    "TASKKEEPER_DATA_DIR": "Directory holding the data files (default: current directory).",
    "TASKKEEPER_USERS_PATH": "Accounts file, login|password per line (default: <data_dir>/users.txt).",
    "TASKKEEPER_TASKS_PATH": (
        "Tasks file, id|title|description|priority|status|owner per line "
        "(default: <data_dir>/tasks.txt)."
    ),
}
