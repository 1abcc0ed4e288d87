import os

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", "data-test")
STORE_KEY = "academia-system-db"

API_LATENCY_SECONDS = 0.0

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
