# main.py - portfolio site (pages, resume download, profile API)

import json
import logging
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

import site_content
from config import PUBLIC_DIR, Settings
from negotiation import PageResponder
from portfolio_models import ProfileUpdate
from profile_service import ProfileService, ProfileUnavailable
from record_store import RecordStore, SQLiteRecordStore, StoreError
from resume_service import ResumeService, ResumeUnavailable

logger = logging.getLogger("portfolio-api")


def open_store(settings: Settings) -> RecordStore:
    store = SQLiteRecordStore(settings.db_path)
    try:
        store.connect()
    except StoreError as e:
        # keep serving pages; store routes will answer 500
        logger.error("Store connection error: %s", e)
    return store


def _read_json(raw: bytes) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.info("ignoring non-JSON profile update body")
        return None


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    if store is None:
        store = open_store(settings)

    profiles = ProfileService(store)
    resumes = ResumeService(store, disposition=settings.resume_disposition)
    pages = PageResponder(mode=settings.page_mode)

    app = FastAPI(title="Portfolio", version="1.0.0")
    app.state.settings = settings
    app.state.store = store
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ----------------------------
    # Pages
    # ----------------------------
    @app.get("/")
    def home(request: Request):
        return pages.page(request, "index", site_content.HOME)

    @app.get("/about")
    def about(request: Request):
        return pages.page(request, "about", site_content.ABOUT)

    @app.get("/contact")
    def contact(request: Request):
        return pages.page(request, "contact", site_content.CONTACT)

    @app.get("/portfolio")
    def portfolio(request: Request):
        return pages.page(request, "portfolio", site_content.portfolio_json())

    # ----------------------------
    # Resume
    # ----------------------------
    @app.get("/resume")
    def resume():
        try:
            doc = resumes.get_resume()
        except ResumeUnavailable as e:
            return PlainTextResponse(str(e), status_code=500)

        if doc is None:
            return PlainTextResponse("Resume not found", status_code=404)

        # stored type is sent verbatim, no charset appended
        headers = {"Content-Type": doc.content_type, **resumes.headers_for(doc)}
        return Response(content=doc.data, headers=headers)

    # ----------------------------
    # Profile API (unauthenticated)
    # ----------------------------
    @app.get("/api/profile")
    def get_profile():
        try:
            profile = profiles.get_profile()
        except ProfileUnavailable as e:
            return JSONResponse(status_code=500, content={"error": str(e)})
        return profile.to_json()

    @app.put("/api/profile")
    async def update_profile(request: Request):
        patch = ProfileUpdate.from_payload(_read_json(await request.body()))
        try:
            message, profile = await run_in_threadpool(profiles.update_profile, patch)
        except ProfileUnavailable as e:
            return JSONResponse(status_code=500, content={"error": str(e)})
        return {"message": message, "profile": profile.to_json()}

    @app.get("/health")
    def health():
        return {"status": "ok", "store": store.name}

    # ----------------------------
    # Fallback 404 + static assets
    # ----------------------------
    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return pages.not_found(request)
        return await http_exception_handler(request, exc)

    if PUBLIC_DIR.is_dir():
        for sub in sorted(p for p in PUBLIC_DIR.iterdir() if p.is_dir()):
            app.mount(f"/{sub.name}", StaticFiles(directory=sub), name=sub.name)

    return app


app = create_app()


def main() -> None:
    settings = app.state.settings
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
