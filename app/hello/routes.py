from fastapi import APIRouter, HTTPException, Depends
import logging
from .schemas import GreetingRequest, GreetingResponse, SumRequest, SumResponse
from .services import greeting_service, arithmetic_service

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Hello"],
    responses={404: {"description": "Not found"}},
)

@router.get("", response_model=GreetingResponse)
async def hello(request: GreetingRequest = Depends()):
    """
    Greet the given name, or World when none is given
    """
    try:
        logger.info(f"Greeting requested for name: {request.name!r}")
        return GreetingResponse(message=greeting_service.greet(request.name))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error building greeting: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Greeting error: {str(e)}")

@router.post("/sum", response_model=SumResponse)
async def sum_numbers(request: SumRequest):
    """
    Add two integers; missing operands count as 0
    """
    try:
        logger.info(f"Sum requested: a={request.a}, b={request.b}")
        return SumResponse(result=arithmetic_service.add(request.a, request.b))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error computing sum: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Sum error: {str(e)}")
