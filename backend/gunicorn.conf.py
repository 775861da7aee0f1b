# gunicorn.conf.py — Production server configuration.
#
# Run from backend/ with:
#   gunicorn api.main:app -c gunicorn.conf.py
#
# WEB_CONCURRENCY and PORT override the defaults below (most PaaS hosts set them).

import os

# Worker process count — 2x CPU cores + 1 is the standard heuristic
workers = int(os.getenv("WEB_CONCURRENCY", "4"))
worker_class = "uvicorn.workers.UvicornWorker"

bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"

# Access/error logs to stdout/stderr; app logs are JSON via core/logging.py
accesslog = "-"
errorlog  = "-"
loglevel  = "info"

# Timeouts — event queries are short, so fail fast
timeout          = 30
keepalive        = 5
graceful_timeout = 20
