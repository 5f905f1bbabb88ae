"""Gunicorn config for deployment."""
import os
import threading
import time
import urllib.request

bind = f"0.0.0.0:{os.environ.get('PORT', '8050')}"


def post_worker_init(worker):
    """After a gunicorn worker starts, load the sales CSV in the background.

    The first page view then hits a warm dataset cache instead of parsing
    the whole file inside the request.
    """
    def _reload():
        time.sleep(3)  # wait for server to be ready
        try:
            port = worker.cfg.bind[0].split(":")[-1] if worker.cfg.bind else "8050"
            url = f"http://127.0.0.1:{port}/api/reload"
            urllib.request.urlopen(url, timeout=30)
            worker.log.info("Warmed dataset cache")
        except Exception as e:
            worker.log.warning(f"Dataset warm-up failed: {e}")

    t = threading.Thread(target=_reload, daemon=True)
    t.start()
