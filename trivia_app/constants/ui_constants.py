"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "TriviaQt"
WINDOW_MIN_WIDTH: int = 640
WINDOW_MIN_HEIGHT: int = 480

LOGIN_TITLE: str = "Login"
LOGIN_PLACEHOLDER: str = "Enter your username"
LOGIN_BUTTON: str = "Login"
LOGIN_EMPTY_HINT: str = "Please enter a username to start."

WELCOME_TEMPLATE: str = "Welcome, {username}!"
TIMER_TEMPLATE: str = "Time remaining: {seconds} seconds"
LOADING_MESSAGE: str = "Loading questions..."
QUESTION_POSITION_TEMPLATE: str = "Question {position} of {count}"
ANSWERED_TEMPLATE: str = "Answered: {answered} / {count}"

RESULT_TITLE: str = "Quiz Results"
RESULT_CORRECT_TEMPLATE: str = "Correct answers: {count}"
RESULT_WRONG_TEMPLATE: str = "Wrong answers: {count}"
RESULT_TOTAL_TEMPLATE: str = "Total answered: {answered} of {count}"
RESULT_ACCURACY_TEMPLATE: str = "Accuracy: {percentage:.0f}%"
RESULT_TIMED_OUT: str = "Time ran out before every question was answered."
RESULT_RESTART_BUTTON: str = "Start New Quiz"
