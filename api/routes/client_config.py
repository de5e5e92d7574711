"""
Public client configuration.

The browser fetches this once at startup. Only publishable values belong
here; secrets stay in Settings.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from modules.auth.exceptions import DEFAULT_SIGN_IN_MESSAGE, SIGN_IN_ERROR_MESSAGES
from shared.config import Settings

from ..dependencies import get_app_settings

router = APIRouter()


class ClientConfigResponse(BaseModel):
    """Keys are camelCase for the JavaScript client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    paystack_public_key: str
    supabase_url: str
    supabase_anon_key: str
    currency: str
    access_duration_hours: int
    featured_video_id: str
    sign_in_error_messages: dict[str, str]
    default_sign_in_error_message: str


@router.get("/config", response_model=ClientConfigResponse)
async def get_client_config(
    settings: Settings = Depends(get_app_settings),
) -> ClientConfigResponse:
    return ClientConfigResponse(
        paystack_public_key=settings.paystack_public_key,
        supabase_url=settings.supabase_url,
        supabase_anon_key=settings.supabase_anon_key,
        currency=settings.currency,
        access_duration_hours=settings.access_duration_hours,
        featured_video_id=settings.featured_video_id,
        sign_in_error_messages=dict(SIGN_IN_ERROR_MESSAGES),
        default_sign_in_error_message=DEFAULT_SIGN_IN_MESSAGE,
    )
