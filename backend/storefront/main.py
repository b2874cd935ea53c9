"""
# `storefront/main.py` — Application entry point

- Creates the FastAPI app and configures CORS from `settings.allowed_origins`.
- Includes the public routers: `/v1/auth`, `/v1/users`, `/v1/products`, `/v1/cart`.
- Renders every `ApiError` as `{"code": <status>, "message": <text>}`; 401 answers carry
  `WWW-Authenticate: Bearer`.
- On startup configures logging and, unless a store was already attached (tests),
  connects to Firestore and stores the adapter on `app.state.store`.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.config import get_settings, init_firestore
from storefront.core.errors import ApiError
from storefront.repositories.store import FirestoreDocumentStore
from storefront.routers import auth, carts, products, users

logger = logging.getLogger("storefront")

app = FastAPI(
    title="Storefront API",
    description="Users, carts and wallet checkout over Firestore.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(products.router)
app.include_router(carts.router)


@app.exception_handler(ApiError)
async def _api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message,
                     exc_info=exc.__cause__ or exc)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.status_code, "message": exc.message},
        headers=headers,
    )


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok"}


@app.on_event("startup")
async def _startup():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if getattr(app.state, "store", None) is None:
        app.state.store = FirestoreDocumentStore(
            init_firestore(settings), prefix=settings.firestore_collection_prefix
        )
        logger.info("Connected to Firestore project %s", settings.firebase_project_id or "(default)")


# Run the app directly with uvicorn (for development)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("storefront.main:app", host="0.0.0.0", port=8000, reload=get_settings().debug)
