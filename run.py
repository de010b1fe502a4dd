import os

from dotenv import load_dotenv

from rentdesk import create_app
from rentdesk.scheduler import start_lease_scheduler

# Load environment variables from .env file
load_dotenv()

app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", 8000))  # Default to 8000 if not in .env
    start_lease_scheduler(app)
    # The reloader would start a second scheduler in the child process
    app.run(host="0.0.0.0", port=port, use_reloader=False)
