MIN_WINDOW_DAYS = 1
MAX_WINDOW_DAYS = 365
