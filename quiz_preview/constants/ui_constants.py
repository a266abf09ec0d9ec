"""Qt UI constants used across widgets."""

WINDOW_TITLE_TEMPLATE: str = "Preview: {title}"
UNTITLED_QUIZ: str = "Untitled quiz"

NEXT_BUTTON: str = "Next"
FINISH_BUTTON: str = "Finish"
CLOSE_BUTTON: str = "Close"

QUESTION_PROGRESS_TEMPLATE: str = "Question {number} of {count}"
POINTS_TEMPLATE: str = "{points} points"
COUNTDOWN_TEMPLATE: str = "{seconds}s"

SLIDER_RANGE_TEMPLATE: str = "Min: {min}    Max: {max}"
SLIDER_VALUE_TEMPLATE: str = "Current value: {value}"
FREE_TEXT_PLACEHOLDER: str = "Type your answer here..."
ORDERING_HINT: str = "Drag the items into the correct order."

RESULT_HEADING: str = "Quiz Complete!"
RESULT_SCORE_TEMPLATE: str = "Your Score: {score} points"
RESULT_PERCENTAGE_TEMPLATE: str = "{percentage}% Correct"
RESULT_BREAKDOWN_TEMPLATE: str = "Q{number}: {awarded:g} / {points:g}"

IMPORT_ERROR_TITLE: str = "Could not open quiz"
ANSWER_ERROR_TITLE: str = "Answer rejected"
