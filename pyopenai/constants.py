VERSION = "0.1.0"

BASE_URL = "https://api.openai.com"
DEFAULT_VERSION = "v1"
ENV_TOKEN = "OPENAI_API_KEY"

# seconds; passed to every requests call
DEFAULT_TIMEOUT = 45.0

MODELS_PATH = "models"
COMPLETION_PATH = "completions"
EDIT_PATH = "edits"
IMAGE_PATH = "images/generations"
