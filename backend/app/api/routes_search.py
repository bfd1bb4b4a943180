import logging
from urllib.parse import urlencode

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.models.schemas import SearchForm, ValidationResponse
from app.services.validation import validate_search

logger = logging.getLogger(__name__)

router = APIRouter()


def results_path(form: SearchForm) -> str:
    params = {
        "city": form.city,
        "checkin": form.check_in,
        "checkout": form.check_out,
        "guests": str(form.guests),
    }
    return f"/hotels?{urlencode(params)}"


@router.post(
    "",
    response_model=ValidationResponse,
    responses={422: {"model": ValidationResponse}},
)
def submit_search(form: SearchForm):
    result = validate_search(form.to_domain())
    if not result.is_valid:
        logger.info("Rejected search for %r: %s", form.city, "; ".join(result.errors))
        return JSONResponse(
            status_code=422,
            content=ValidationResponse.from_domain(result).model_dump(),
        )
    return ValidationResponse.from_domain(result, results_path=results_path(form))
