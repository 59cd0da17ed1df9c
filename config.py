import os
from dotenv import load_dotenv

# Charge le .env local (utile pour dev/local)
load_dotenv()

# --- CLÉ D'API ---
API_KEY = os.getenv("API_KEY")

# --- CONFIGURATION API NEWSAPI ---
NEWSAPI_BASE_URL = os.getenv("NEWSAPI_BASE_URL", "https://newsapi.org/v2")
NEWSAPI_TIMEOUT = float(os.getenv("NEWSAPI_TIMEOUT", "15"))
NEWSAPI_USER_AGENT = os.getenv("NEWSAPI_USER_AGENT")

# --- PARAMÈTRES DE L'APPLICATION ---
HEADLINES_CONFIG_FILE = os.path.expanduser(os.getenv(
    "HEADLINES_CONFIG_FILE",
    os.path.join(os.path.expanduser("~"), ".config", "headlines", "headlines.yaml"),
))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
