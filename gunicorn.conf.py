# gunicorn.conf.py
import os

wsgi_app = "kitchenking.app:app"

# Bind to address and port
bind = os.getenv("BIND", "0.0.0.0:8076")

# Worker class - using Uvicorn worker for ASGI apps
worker_class = "uvicorn.workers.UvicornWorker"

# Kitchen state lives in process memory, so every client must reach the same worker
workers = int(os.getenv("WEB_CONCURRENCY", "1"))

# Chef requests may take up to LLM_REQUEST_TIMEOUT; keep the worker alive past that
timeout = int(os.getenv("TIMEOUT", "150"))
graceful_timeout = int(os.getenv("GRACEFUL_TIMEOUT", "30"))
keepalive = int(os.getenv("KEEPALIVE", "5"))

# Whitelisted IPs for X-Forwarded-For header
forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")

# Logs
accesslog = "-" if os.getenv("ACCESS_LOG", "1") == "1" else None
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info")
capture_output = True
