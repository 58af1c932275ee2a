from fastapi import APIRouter

from reflections_api.api import blogs, books, comments, events, forms, system

api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(forms.router)
api_router.include_router(blogs.router)
api_router.include_router(events.router)
api_router.include_router(books.router)
api_router.include_router(comments.router)
