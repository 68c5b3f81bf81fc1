"""Service identity and health checks."""

from fastapi import APIRouter, Request

from models import HealthResponse, ServiceInfo

router = APIRouter(tags=["system"])


@router.get("/", response_model=ServiceInfo)
def index(request: Request) -> ServiceInfo:
    return ServiceInfo(service=request.app.state.settings.SERVICE_NAME)


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()
