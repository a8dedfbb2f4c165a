# selva/routes/resource_routes.py
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Query, Request

from selva.middleware.rbac import is_admin
from selva.services.resource_service import ResourceService


def register_resource_routes(
    router: APIRouter,
    service_cls: type[ResourceService],
    get_service: Callable,
    public_create: bool = False,
) -> APIRouter:
    """
    Attach list/detail/create/update/delete routes for one collection.

    Called after any fixed sub-paths (e.g. /cart) are registered so that
    /{item_id} does not shadow them.
    """
    create_schema = service_cls.create_schema
    update_schema = service_cls.update_schema
    create_guard = [] if public_create else [Depends(is_admin)]

    @router.get("")
    async def list_items(
        request: Request,
        limit: Optional[int] = Query(None, ge=1),
        service: ResourceService = Depends(get_service),
    ):
        return await service.list(dict(request.query_params), limit=limit)

    @router.get("/{item_id}")
    async def get_item(item_id: str, service: ResourceService = Depends(get_service)):
        return await service.get_by_id(item_id)

    @router.post("", status_code=201, dependencies=create_guard)
    async def create_item(data: create_schema, service: ResourceService = Depends(get_service)):
        return await service.create(data)

    @router.put("/{item_id}", dependencies=[Depends(is_admin)])
    async def update_item(item_id: str, data: update_schema, service: ResourceService = Depends(get_service)):
        return await service.update(item_id, data)

    @router.delete("/{item_id}", dependencies=[Depends(is_admin)])
    async def delete_item(item_id: str, service: ResourceService = Depends(get_service)):
        return await service.delete(item_id)

    return router
