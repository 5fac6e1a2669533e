import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Static roster file: JSON array of {"id", "name", "class"}
ROSTER_PATH = os.getenv("ROSTER_PATH", "data/students.json")

# PRESENT_ONLY or ABSENT_ONLY
COMMENT_POLICY = os.getenv("COMMENT_POLICY", "PRESENT_ONLY")
# STUDENT_RECORDED_DAYS or CLASS_REPORT_DAYS
PERCENTAGE_BASIS = os.getenv("PERCENTAGE_BASIS", "STUDENT_RECORDED_DAYS")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
