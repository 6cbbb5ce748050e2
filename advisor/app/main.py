"""FastAPI application for the settlement placement advisor."""

import uvicorn

from common import app as common_app
from common import settings

from .placement.engine import errors
from .routers import placement

app = common_app.create_app(
    title='Placement Advisor', bad_request_errors=(errors.PlacementError,)
)

app.include_router(placement.router)


if __name__ == '__main__':
    uvicorn.run(app, host='0.0.0.0', port=settings.PORT)
