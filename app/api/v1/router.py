from fastapi import APIRouter

from app.api.routers import admin, balances, contracts, jobs

api_router = APIRouter()

api_router.include_router(contracts.router)
api_router.include_router(jobs.router)
api_router.include_router(balances.router)
api_router.include_router(admin.router)
