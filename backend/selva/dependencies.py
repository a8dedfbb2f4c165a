# selva/dependencies.py
from fastapi import Request

from selva.services.auth_service import AuthService
from selva.services.cart_service import CartService, WishlistService
from selva.services.resources import (
    BlogService,
    NotificationService,
    ProductService,
    SalonServiceService,
    TestimonialService,
)


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def get_salon_service_service(request: Request) -> SalonServiceService:
    return request.app.state.salon_service_service


def get_blog_service(request: Request) -> BlogService:
    return request.app.state.blog_service


def get_testimonial_service(request: Request) -> TestimonialService:
    return request.app.state.testimonial_service


def get_notification_service(request: Request) -> NotificationService:
    return request.app.state.notification_service


def get_cart_service(request: Request) -> CartService:
    return request.app.state.cart_service


def get_wishlist_service(request: Request) -> WishlistService:
    return request.app.state.wishlist_service
