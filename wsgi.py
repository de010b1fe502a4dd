#!/usr/bin/env python3
import os

from rentdesk import create_app
from rentdesk.scheduler import start_lease_scheduler

# gunicorn wsgi:app
app = create_app(os.environ.get("CONFIG_CLASS", "config.ProductionConfig"))
start_lease_scheduler(app)

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=False)
