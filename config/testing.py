SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Tests always run against the documented defaults
ATTENDANCE_RULES = {}
