import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ROSTER_PATH = os.getenv("ROSTER_PATH", "data/students.json")

COMMENT_POLICY = os.getenv("COMMENT_POLICY", "PRESENT_ONLY")
PERCENTAGE_BASIS = os.getenv("PERCENTAGE_BASIS", "STUDENT_RECORDED_DAYS")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
