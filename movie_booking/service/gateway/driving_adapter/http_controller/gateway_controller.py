from fastapi import APIRouter

from movie_booking.platform.config.core_setting import settings


router = APIRouter()


@router.get('/')
async def gateway_info() -> dict[str, object]:
    """Static descriptor of the platform and where each service lives."""
    return {
        'message': f'{settings.PROJECT_NAME} API Gateway',
        'status': 'running',
        'version': settings.VERSION,
        'endpoints': settings.SERVICE_ENDPOINTS,
    }
