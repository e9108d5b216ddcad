# config.py
import os

SECRET_KEY = "dev-secret"
HOST = "127.0.0.1"
PORT = int(os.getenv("PORT", 5000))
DEBUG = False
LOG_LEVEL = "INFO"
