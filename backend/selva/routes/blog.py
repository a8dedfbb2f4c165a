# selva/routes/blog.py
from fastapi import APIRouter

from selva.dependencies import get_blog_service
from selva.routes.resource_routes import register_resource_routes
from selva.services.resources import BlogService

blog_router = APIRouter(tags=["Blog"])

register_resource_routes(blog_router, BlogService, get_blog_service)
