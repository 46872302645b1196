"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: None.
- Outputs: Constants (endpoint, headers, timeouts, file names, UI limits).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

WINDOW_TITLE = "icanhazdadjoke?"

# Joke endpoint: one random joke per GET, JSON only when asked for it
JOKE_API_URL = "https://icanhazdadjoke.com/"
REQUEST_HEADERS = {
    "Accept": "application/json",
    # icanhazdadjoke asks API clients to identify themselves
    "User-Agent": "dadjokes-desktop/1.0.0",
}
REQUEST_TIMEOUT_SEC = 10

# Persistence: filename for saved favourites (path resolved in storage module)
APP_DIR_NAME = "Dad Jokes"
FAVOURITES_FILENAME = "favourites.json"
HOME_ENV_VAR = "DADJOKES_HOME"

# Upper bound for waiting on the last favourites write when the window closes
PERSIST_TIMEOUT_SEC = 2.0

# Logging
LOG_LEVEL_ENV_VAR = "DADJOKES_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_MAX_LINES = 1000  # maximum number of lines kept in the Logs panel (oldest trimmed)

# Heart colours: favourited vs not
HEART_ON_COLOUR = "#FF6A6A"
HEART_OFF_COLOUR = "#8a8a8a"

# Longest favourite shown in the list before it is shortened with an ellipsis
FAVOURITE_LABEL_MAX = 90
