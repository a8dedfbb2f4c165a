# selva/routes/services.py
from fastapi import APIRouter

from selva.dependencies import get_salon_service_service
from selva.routes.resource_routes import register_resource_routes
from selva.services.resources import SalonServiceService

service_router = APIRouter(tags=["Services"])

register_resource_routes(service_router, SalonServiceService, get_salon_service_service)
