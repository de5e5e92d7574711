"""
Payment verification endpoint.

POST /api/verify-payment is a thin server-side proxy to Paystack so the
secret key never reaches the browser. It answers with a uniform
{success, message} envelope instead of the API error format.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_payment_gateway

from .interfaces import IPaymentGateway
from .models import VerifyPaymentRequest, VerifyPaymentResponse
from .exceptions import GatewayNotConfiguredError, GatewayRejectedError

logger = logging.getLogger(__name__)

router = APIRouter()


def _reply(status_code: int, response: VerifyPaymentResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=response.model_dump(exclude_none=True))


@router.post("/verify-payment", response_model=VerifyPaymentResponse)
async def verify_payment(
    request: VerifyPaymentRequest,
    gateway: IPaymentGateway = Depends(get_payment_gateway),
) -> JSONResponse:
    """
    Verify a transaction reference with Paystack.

    - 200: the gateway reports the transaction as successful
    - 400: the gateway rejected the lookup, or the status is not success
    - 500: the secret key is missing, or anything else went wrong
    """
    try:
        verification = await gateway.verify(request.reference)
    except GatewayNotConfiguredError as e:
        return _reply(500, VerifyPaymentResponse(success=False, message=e.message))
    except GatewayRejectedError as e:
        return _reply(
            400,
            VerifyPaymentResponse(success=False, message=e.message, reference=request.reference),
        )
    except Exception:
        logger.exception(f"Payment verification error for {request.reference}")
        return _reply(500, VerifyPaymentResponse(success=False, message="Internal server error"))

    if not verification.successful:
        return _reply(
            400,
            VerifyPaymentResponse(
                success=False,
                message="Payment was not successful",
                reference=verification.reference,
            ),
        )

    logger.info(f"Payment verified: {verification.reference}")
    return _reply(
        200,
        VerifyPaymentResponse(
            success=True,
            message="Payment verified successfully",
            reference=verification.reference,
            amount=verification.amount,
            currency=verification.currency,
        ),
    )
