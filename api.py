"""
MoodMuse REST API Server

Run the server with:
    python api.py

Or with uvicorn directly:
    uvicorn api:app --host 0.0.0.0 --port 3001
"""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from moodmuse.api.app import create_app
from moodmuse.config.settings import ConfigManager


config = ConfigManager().load(os.getenv("MOODMUSE_CONFIG"))

app = create_app(config)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=config.server.host,
        port=config.server.port
    )
