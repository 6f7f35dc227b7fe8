# Gunicorn configuration for the ATS workflow service

bind = "0.0.0.0:10000"

# One worker keeps SQLite usable for local runs
workers = 1

# ASGI app, so use uvicorn's worker
worker_class = "uvicorn.workers.UvicornWorker"

timeout = 120

graceful_timeout = 30

keepalive = 5

loglevel = "info"

# Access log
accesslog = "-"

# Error log
errorlog = "-"
