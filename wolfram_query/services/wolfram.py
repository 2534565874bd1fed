import logging

import requests
from pydantic import ValidationError

from wolfram_query.config import get_settings
from wolfram_query.exceptions import ConfigurationError, QueryUnsuccessfulError, TransportError
from wolfram_query.models.wolfram import QueryFailure, QueryOutcome, QuerySuccess, WolframResponse

logger = logging.getLogger(__name__)

WOLFRAM_API_BASE = "https://api.wolframalpha.com"

INVALID_RESPONSE_MESSAGE = "Invalid response format from Wolfram Alpha"
UNSUCCESSFUL_QUERY_MESSAGE = "Wolfram Alpha query was unsuccessful"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"

# Timeouts are hints for the Wolfram servers, not client-side deadlines.
QUERY_PARAMS = {
    "output": "json",
    "format": "plaintext,image",
    "podstate": "Step-by-step solution",
    "scantimeout": "3.0",
    "podtimeout": "4.0",
    "formattimeout": "8.0",
    "parsetimeout": "4.0",
}


def _get_app_id() -> str:
    app_id = get_settings().wolfram_app_id
    if not app_id:
        raise ConfigurationError("WOLFRAM_APP_ID environment variable is not set")
    return app_id


def query(input_text: str) -> QueryOutcome:
    """Full structured query, including step-by-step pods when Wolfram offers them.

    Failures come back as a QueryFailure; only a missing AppID raises.
    """
    app_id = _get_app_id()

    try:
        resp = requests.get(
            f"{WOLFRAM_API_BASE}/v2/query",
            params={"input": input_text, "appid": app_id, **QUERY_PARAMS},
        )
        if not 200 <= resp.status_code < 300:
            raise TransportError(resp.status_code)

        # Malformed JSON surfaces as a ValidationError as well
        data = WolframResponse.model_validate_json(resp.content)

        if not data.queryresult.success:
            raise QueryUnsuccessfulError(UNSUCCESSFUL_QUERY_MESSAGE)

        return QuerySuccess(data=data)

    except ValidationError as e:
        logger.error("Response validation error: %s", e.errors())
        return QueryFailure(error=INVALID_RESPONSE_MESSAGE)

    except Exception as e:
        logger.error("Wolfram Alpha API error: %s", e)
        return QueryFailure(error=str(e) or UNKNOWN_ERROR_MESSAGE)
