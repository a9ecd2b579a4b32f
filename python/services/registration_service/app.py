"""Registration Service: FastAPI application for student registration."""

from __future__ import annotations

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from easycrud_common.models import User, UserBase
from registration_service.config import Settings, get_settings
from registration_service.logging_config import setup_logging
from registration_service.store import UserStore

system_router = APIRouter(tags=["system"])
users_router = APIRouter(tags=["users"])


def get_store(request: Request) -> UserStore:
    return request.app.state.store


@system_router.get("/health", response_class=PlainTextResponse)
def health():
    return "OK"


@system_router.get("/", response_class=PlainTextResponse)
def root():
    return "EasyCRUD Backend is running!"


@users_router.post("/register", response_model=User)
def register_user(payload: UserBase, store: UserStore = Depends(get_store)):
    return store.register(payload)


@users_router.get("/users", response_model=list[User])
def list_users(store: UserStore = Depends(get_store)):
    return store.list_all()


@users_router.delete("/users/{user_id}", response_class=PlainTextResponse)
def delete_user(user_id: int, store: UserStore = Depends(get_store)):
    if store.delete_by_id(user_id):
        return PlainTextResponse("User deleted successfully")
    return PlainTextResponse("User not found", status_code=status.HTTP_404_NOT_FOUND)


def create_app(
    settings: Settings | None = None,
    store: UserStore | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)
    app.state.store = store if store is not None else UserStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(system_router)
    app.include_router(users_router, prefix=settings.api_prefix)

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
