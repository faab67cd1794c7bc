"""Environment configuration shared by the repository factories."""

from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent


def load_env_file() -> None:
    """Load .env from the project root, or from the current directory if absent."""
    env_file = PROJECT_ROOT / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        load_dotenv()
