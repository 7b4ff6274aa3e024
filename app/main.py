# app/main.py
from typing import Optional

from fastapi import Depends, FastAPI, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .auth import AuthGate, gate_from_settings
from .config import Settings, get_settings
from .database import ProductStore
from .dependencies import authenticate, get_store
from .logger import configure_logging, get_logger
from .middleware import log_requests, register_error_handlers
from .models import ProductIn, ProductUpdate
from .sdk import (
    WELCOME_TEXT, create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, product_stats_logic, search_products_logic,
    update_product_logic,
)

logger = get_logger("main")


def create_app(store: Optional[ProductStore] = None,
               auth_gate: Optional[AuthGate] = None,
               settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="product-api (in-memory demo)")
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore()
    app.state.auth_gate = auth_gate or gate_from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    register_error_handlers(app)

    # ---------------------------
    # Root
    # ---------------------------
    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return WELCOME_TEXT

    # ---------------------------
    # Product queries
    # /search and /stats must be registered before /{product_id}
    # ---------------------------
    @app.get("/api/products/search")
    async def search_products(name: Optional[str] = None,
                              store: ProductStore = Depends(get_store)):
        return await search_products_logic(store, name)

    @app.get("/api/products")
    async def list_products(category: Optional[str] = None,
                            page: int = Query(1, ge=1),
                            limit: int = Query(10, ge=1),
                            store: ProductStore = Depends(get_store)):
        return await list_products_logic(store, category, page, limit)

    @app.get("/api/products/stats")
    async def product_stats(store: ProductStore = Depends(get_store)):
        return await product_stats_logic(store)

    @app.get("/api/products/{product_id}")
    async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
        return await get_product_logic(store, product_id)

    # ---------------------------
    # Product mutations
    # the auth gate dependency runs before the body model is validated
    # ---------------------------
    @app.post("/api/products", status_code=201, dependencies=[Depends(authenticate)])
    async def create_product(payload: ProductIn,
                             store: ProductStore = Depends(get_store)):
        return await create_product_logic(store, payload)

    @app.put("/api/products/{product_id}", dependencies=[Depends(authenticate)])
    async def update_product(product_id: str,
                             payload: ProductUpdate,
                             store: ProductStore = Depends(get_store)):
        return await update_product_logic(store, product_id, payload)

    @app.delete("/api/products/{product_id}", status_code=204,
                dependencies=[Depends(authenticate)])
    async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
        await delete_product_logic(store, product_id)
        return Response(status_code=204)

    logger.info(
        "app ready: %d products, api key %s, auth gate %s",
        len(app.state.store),
        "configured" if settings.api_key else "not configured",
        getattr(app.state.auth_gate, "__name__", "custom"),
    )
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
