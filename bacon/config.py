"""
Configuration constants for the Bacon Game project.

All paths, defaults, and tunable parameters are defined here.
Values can be overridden through environment variables or a .env file
at the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of bacon/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Data directory (contains actors, movies, and cast membership files)
DATA_DIR = Path(os.environ.get("BACON_DATA_DIR", PROJECT_ROOT / "data"))

# Individual data file names
ACTORS_FILE = "actors.txt"
MOVIES_FILE = "movies.txt"
MOVIE_ACTORS_FILE = "movie-actors.txt"

ACTORS_PATH = DATA_DIR / ACTORS_FILE
MOVIES_PATH = DATA_DIR / MOVIES_FILE
MOVIE_ACTORS_PATH = DATA_DIR / MOVIE_ACTORS_FILE

# =============================================================================
# File Format Configuration
# =============================================================================

# Field separator used by all three input files
FIELD_SEPARATOR = "|"

# Encoding of the input files
FILE_ENCODING = "utf-8"

# =============================================================================
# Game Configuration
# =============================================================================

# Default center of the acting universe
DEFAULT_CENTER = os.environ.get("BACON_CENTER", "Kevin Bacon")

# Prompt shown by the interactive console
PROMPT = "Kevin Bacon game >"

# =============================================================================
# Random Walk Configuration
# =============================================================================

# Probability of taking another step on each walk
DEFAULT_KEEP_ON = 0.9

# Number of walks used for frequency ranking
DEFAULT_NUM_WALKS = 1000

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").strip().upper()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def data_paths(data_dir: Path = DATA_DIR) -> dict[str, Path]:
    """Return the three input file paths inside a data directory."""
    data_dir = Path(data_dir)
    return {
        "actors": data_dir / ACTORS_FILE,
        "movies": data_dir / MOVIES_FILE,
        "movie_actors": data_dir / MOVIE_ACTORS_FILE,
    }


def validate_data_files(data_dir: Path = DATA_DIR) -> dict[str, bool]:
    """Check which data files exist."""
    return {name: path.exists() for name, path in data_paths(data_dir).items()}


def get_missing_data_files(data_dir: Path = DATA_DIR) -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files(data_dir)
    return [name for name, exists in status.items() if not exists]
