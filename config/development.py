import os

from config import attendance_rules_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

ATTENDANCE_RULES = attendance_rules_from_env()
