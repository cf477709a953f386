from fastapi import APIRouter

from .api_models import HealthCheck

router = APIRouter()


@router.get(
    "",
    response_model=HealthCheck,
    summary="Проверка работоспособности",
    description="Возвращает 200, если сервер запущен.",
)
async def health_check() -> HealthCheck:
    return HealthCheck(status="OK", message="Server is running")
