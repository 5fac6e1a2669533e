import os

SECRET_KEY = "test-secret"

ROSTER_PATH = os.getenv("ROSTER_PATH", "data/students.json")

COMMENT_POLICY = "PRESENT_ONLY"
PERCENTAGE_BASIS = "STUDENT_RECORDED_DAYS"

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True
