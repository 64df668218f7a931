"""Entry-point script – runs the schemabridge FastAPI app under Uvicorn."""

import uvicorn

from schemabridge import config


if __name__ == "__main__":
    # For development: uvicorn schemabridge:app --reload --port 5001
    uvicorn.run(
        "schemabridge:app",
        host=config.get('api', {}).get('host', "127.0.0.1"),
        port=config.get('api', {}).get('port', 5001),
        reload=config.get('api', {}).get('debug', False),
    )
