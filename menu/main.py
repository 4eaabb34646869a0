import logging

import uvicorn
from menu.api.api_run import app
from menu.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from menu.utilities.network import server_urls


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url, lan_url = server_urls(APP_PORT)
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    # Also show the LAN-accessible URL for other devices on the same network
    if lan_url:
        print(f"Accessible from other devices at: {lan_url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
