"""Gunicorn configuration file for production."""
import multiprocessing
import os

wsgi_app = "config.wsgi:application"

# Bind to all interfaces, port from the environment
bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"

# Worker processes; requests are handled synchronously by each worker
workers = int(os.getenv("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
max_requests = 1000
max_requests_jitter = 50

# Timeout
timeout = int(os.getenv("GUNICORN_TIMEOUT", "30"))
keepalive = 5

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s %(M)sms'

# Process naming
proc_name = "car_rental"

# Security
limit_request_line = 4096
limit_request_fields = 100
limit_request_field_size = 8190

# SSL is terminated by the reverse proxy
forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")
