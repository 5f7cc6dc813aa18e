from fastapi.routing import APIRouter

from nft_viewer_backend.web.api import assets, monitoring

api_router = APIRouter()
api_router.include_router(monitoring.router)
api_router.include_router(assets.router)  # GET /api/assets - Asset metadata
