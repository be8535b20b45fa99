from fastapi import APIRouter
from ttest_tutor.routers import analysis

api_router = APIRouter()
api_router.include_router(analysis.router, prefix="/analysis", tags=["analysis"])
