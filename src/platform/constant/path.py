from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Durable client-side state (access token + user snapshot)
SESSION_DIR = BASE_DIR / '.session'
