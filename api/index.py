"""
Serverless entry point for the Lottery Service API
"""
import sys
import os

# Add parent directory to path
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

# Set environment variables for serverless
os.environ.setdefault("ENVIRONMENT", "production")
os.environ.setdefault("GAME_CONFIG_PATH", os.path.join(parent_dir, "game_config.yaml"))

from mangum import Mangum
from src.main import app

# Lambda handler for the ASGI app; tables and config load in the lifespan
handler = Mangum(app, lifespan="auto")
