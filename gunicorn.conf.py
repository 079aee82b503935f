# Productie-start van de fee simulator:
#   gunicorn dealdesk.main:app -c gunicorn.conf.py
# De berekening is puur CPU en kort, dus weinig workers en een korte timeout volstaan.
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
workers = int(os.getenv("WEB_CONCURRENCY", "2"))
worker_class = "uvicorn.workers.UvicornWorker"
timeout = int(os.getenv("WEB_TIMEOUT", "30"))
graceful_timeout = 10
keepalive = 5
# workers periodiek verversen; jitter voorkomt dat ze allemaal tegelijk herstarten
max_requests = 2000
max_requests_jitter = 200
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
