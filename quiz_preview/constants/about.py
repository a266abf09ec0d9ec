"""Static metadata describing QuizPreview."""

APP_NAME = "QuizPreview"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
