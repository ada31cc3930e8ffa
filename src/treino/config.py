"""Static configuration for the treino client."""

from pathlib import Path

DEFAULT_API_URL = "https://mongo-api-model-guissxs-projects.vercel.app"

# Default data directory (holds the persisted session)
DATA_DIR = Path.home() / ".treino"
SESSION_FILE = "session.json"

# Key of the bearer token inside the persisted slot
TOKEN_KEY = "token"

# Navigation targets
LOGIN_ROUTE = "/login"
REGISTER_ROUTE = "/cadastro"
WORKOUT_CREATE_ROUTE = "/RegistroDeTreinos"
WORKOUT_LIST_ROUTE = "/treinos"
WORKOUT_EDIT_ROUTE = "/edicaotreinos/{workout_id}"

# Seconds a success message stays up before the next transition
CREATE_SUCCESS_DELAY = 3.0
EDIT_SUCCESS_DELAY = 2.0
REGISTER_SUCCESS_DELAY = 2.0


def get_data_dir(data_dir: Path | None = None) -> Path:
    """Get the data directory, creating it if needed."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_session_path(data_dir: Path | None = None) -> Path:
    """Get the session file path."""
    return get_data_dir(data_dir) / SESSION_FILE
