import os
from dotenv import load_dotenv

load_dotenv()

SPOTIFY_API_BASE_URL = os.getenv("SPOTIFY_API_BASE_URL", "https://api.spotify.com/v1")
SPOTIFY_REQUESTS_TIMEOUT = float(os.getenv("SPOTIFY_REQUESTS_TIMEOUT", "5"))

# Solo para main.py; la app recibe el token en cada request
SPOTIFY_ACCESS_TOKEN = os.getenv("SPOTIFY_ACCESS_TOKEN")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
