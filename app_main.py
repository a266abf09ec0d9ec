"""Application entry point for the QuizPreview player."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from quiz_preview.constants.about import APP_NAME, APP_VERSION
from quiz_preview.constants.ui_constants import IMPORT_ERROR_TITLE
from quiz_preview.core.errors import QuizError
from quiz_preview.core.quiz_loader import QuizImportError, load_quiz_from_file
from quiz_preview.core.quiz_runner import QuizRunner
from quiz_preview.ui.dialog_helpers import show_error
from quiz_preview.ui.quiz_preview_window import QuizPreviewWindow
from quiz_preview.utils.logging_config import configure_logging


def main(argv: list[str] | None = None) -> int:
    """Load the quiz named on the command line and play it in a Qt window."""
    argv = list(sys.argv if argv is None else argv)
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(argv)
    if len(argv) < 2:
        show_error(None, IMPORT_ERROR_TITLE, f"Usage: {Path(argv[0]).name} QUIZ_FILE.json")
        return 2

    try:
        quiz = load_quiz_from_file(Path(argv[1]))
        runner = QuizRunner(quiz)
    except (QuizImportError, QuizError) as exc:
        logger.error("Cannot open %s: %s", argv[1], exc)
        show_error(None, IMPORT_ERROR_TITLE, str(exc))
        return 1

    window = QuizPreviewWindow(runner=runner)
    window.show()
    try:
        return app.exec()
    finally:
        runner.close()


if __name__ == "__main__":
    sys.exit(main())
