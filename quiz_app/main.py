from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from quiz_app.auth.auth_router import router as auth_router
from quiz_app.config import CORS_ORIGINS, VERSION
from quiz_app.database import create_indexes, db
from quiz_app.designers.designer_router import router as designer_router
from quiz_app.errors import register_error_handlers
from quiz_app.logging_config import setup_logging
from quiz_app.players.player_router import router as player_router
from quiz_app.users.user_router import router as user_router

setup_logging()

app = FastAPI(title="Quiz Game API", version=VERSION)


@app.on_event("startup")
async def startup_event():
    await create_indexes(db)


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# ==================== ROUTER REGISTRATION ====================
api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(designer_router)
api_router.include_router(player_router)
api_router.include_router(user_router)
app.include_router(api_router)
# ============================================================


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/version")
def get_version():
    return {"version": VERSION, "status": "stable"}
