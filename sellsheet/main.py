import uvicorn
from sellsheet.api.api_run import app
from sellsheet.utilities.config import APP_HOST, APP_PORT, configure_logging


if __name__ == "__main__":
    configure_logging()
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on http://{APP_HOST}:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
