"""fairgoer - fair schedule browser: what's on, what's next, what you saved."""
