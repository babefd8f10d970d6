"""FastAPI application exposing the map operations over HTTP.

Routes:
- POST /api/map/SetMap            (read-write key)
- GET  /api/map/GetMap            (read key)
- GET  /api/map/ShortestRoute     (read key) -> "GACE"
- GET  /api/map/ShortestDistance  (read key) -> 9
- GET  /api/map/ShortestPath      (read key) -> {"path": [...], "distance": 9}

Route functions are synchronous, so FastAPI runs them in its threadpool
and the graph store sees truly concurrent callers.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request, Response
from fastapi.responses import PlainTextResponse

from ..container import Container
from ..services import MapService
from .error_handlers import register_error_handlers
from .schemas import GraphPayload, RouteResponse
from .security import Permission, require_permission, validate_api_config

logger = logging.getLogger(__name__)


def get_map_service(request: Request) -> MapService:
    container: Container = request.app.state.container
    return container.resolve(MapService)


def _build_router(prefix: str) -> APIRouter:
    router = APIRouter(prefix=prefix)
    read = [Depends(require_permission(Permission.READ))]
    read_write = [Depends(require_permission(Permission.READ_WRITE))]

    @router.post("/SetMap", dependencies=read_write)
    def set_map(
        payload: Optional[GraphPayload] = Body(default=None),
        service: MapService = Depends(get_map_service),
    ) -> Response:
        candidate = payload.to_domain() if payload is not None else None
        service.set_graph_or_raise(candidate)
        return Response(status_code=200)

    @router.get("/GetMap", dependencies=read)
    def get_map(service: MapService = Depends(get_map_service)) -> Dict[str, Any]:
        return service.get_graph_or_raise().to_dict()

    @router.get(
        "/ShortestRoute", dependencies=read, response_class=PlainTextResponse
    )
    def shortest_route(
        source: Optional[str] = Query(default=None, alias="from"),
        target: Optional[str] = Query(default=None, alias="to"),
        service: MapService = Depends(get_map_service),
    ) -> str:
        result = service.shortest_path_or_raise(source, target)
        return "".join(result.path)

    @router.get("/ShortestDistance", dependencies=read)
    def shortest_distance(
        source: Optional[str] = Query(default=None, alias="from"),
        target: Optional[str] = Query(default=None, alias="to"),
        service: MapService = Depends(get_map_service),
    ) -> int:
        return service.shortest_path_or_raise(source, target).distance

    @router.get("/ShortestPath", dependencies=read, response_model=RouteResponse)
    def shortest_path(
        source: Optional[str] = Query(default=None, alias="from"),
        target: Optional[str] = Query(default=None, alias="to"),
        service: MapService = Depends(get_map_service),
    ) -> RouteResponse:
        result = service.shortest_path_or_raise(source, target)
        return RouteResponse.from_result(result)

    return router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        container: Optional container override; each container owns its
            own graph store.

    Returns:
        The configured application.

    Raises:
        ConfigurationError: If the API key settings are unusable.
    """
    container = container or Container.create_default()
    config = container.config
    validate_api_config(config.api)

    app = FastAPI(title=config.title)
    app.state.container = container
    app.include_router(_build_router(config.api.prefix))
    register_error_handlers(app)

    logger.info(
        "Application created",
        extra={"prefix": config.api.prefix, "key_header": config.api.key_header},
    )
    return app
