import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = os.getenv("DATA_DIR", "/var/lib/academia-system")
STORE_KEY = os.getenv("STORE_KEY", "academia-system-db")

API_LATENCY_SECONDS = float(os.getenv("API_LATENCY_SECONDS", "0"))

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
