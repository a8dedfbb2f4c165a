# selva/routes/testimonials.py
from fastapi import APIRouter, Depends

from selva.dependencies import get_testimonial_service
from selva.middleware.rbac import is_admin
from selva.routes.resource_routes import register_resource_routes
from selva.services.resources import TestimonialService

testimonial_router = APIRouter(tags=["Testimonials"])


# Admin: approve a submitted testimonial
@testimonial_router.put("/{item_id}/approve", dependencies=[Depends(is_admin)])
async def approve_testimonial(
    item_id: str,
    service: TestimonialService = Depends(get_testimonial_service),
):
    return await service.approve(item_id)


# Submissions are public and start unapproved
register_resource_routes(testimonial_router, TestimonialService, get_testimonial_service, public_create=True)
