from schemabridge.config import config
from .utils.logger import setup_logger

# Log once during package import so we know the package was initialised.
setup_logger('schemabridge_init').info('schemabridge package initialised with FastAPI backend.')

# ------------------------- FastAPI application ---------------------------

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title="Schema Bridge API", version=config.get('api', {}).get('version', 'v1'))

# The desktop client calls the API from its own local origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


from .api.routes import api_router

app.include_router(api_router)

route_logger = setup_logger('routes')
for route in app.routes:
    if hasattr(route, 'methods'):
        route_logger.debug(f"{sorted(route.methods)}  {route.path}")
