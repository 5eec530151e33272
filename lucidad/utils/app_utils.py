import azure.functions as func
import anthropic
import logging
import json
import os
from functools import wraps
from dataclasses import dataclass, asdict
from typing import Any
import traceback

from dotenv import load_dotenv
from pydantic import BaseModel

from lucidad.utils.exceptions import LucidAdError, UNEXPECTED_ERROR_MESSAGE
from lucidad.utils.log_utils import setup_logger

logger = setup_logger(__name__, logging.DEBUG)

@dataclass
class AppError:
    app: str
    error_type: str
    message: str
    traceback: list[str]

    def __str__(self):
        return json.dumps(self.to_dict(), indent=2)
    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_exception(cls, app: str, e: Exception) -> 'AppError':
        return cls(
            app = app,
            error_type = type(e).__name__,
            message = str(e),  # <-- doesn't include stacktrace
            traceback = condensed_tb(e).splitlines()  # <-- now the stacktrace
        )


def load_env_vars(path: str | None = None) -> None:
    """Load a local .env file if there is one. Real environment variables win."""
    load_dotenv(path, override=False)


def json_response(body: Any, status_code: int = 200) -> func.HttpResponse:
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")
    return func.HttpResponse(json.dumps(body), mimetype="application/json", status_code=status_code)


def http_wrap(app_func):
    """
    Decorator that wraps a function to provide logging and HttpResponse handling.

    Return values that are not already an HttpResponse are serialized as JSON
    with status 200. Errors become {"error": ...} bodies:
      - LucidAdError subclasses use their own status code and payload.
      - Upstream API errors are 500 with the provider's message.
      - Anything else is 500 with a generic message.
    """
    @wraps(app_func)
    def wrapper(*args, **kwargs):
        try:
            result = app_func(*args, **kwargs)
            if isinstance(result, func.HttpResponse):
                return result
            return json_response(result, status_code=200)
        except LucidAdError as e:
            app_error = AppError.from_exception(app_func.__name__, e)
            if e.status_code >= 500:
                logger.error(app_error)
            else:
                logger.warning(app_error)
            return json_response({"error": e.payload}, status_code=e.status_code)
        except anthropic.APIError as e:
            logger.error(AppError.from_exception(app_func.__name__, e))
            return json_response({"error": e.message or UNEXPECTED_ERROR_MESSAGE}, status_code=500)
        except Exception as e:
            logger.error(AppError.from_exception(app_func.__name__, e))
            return json_response({"error": UNEXPECTED_ERROR_MESSAGE}, status_code=500)
    return wrapper


def condensed_tb(exc) -> str:
    """
    Formats a traceback object into a condensed list of strings, showing only
    the file basename, line number, and function name, significantly
    reducing verbosity by stripping full directory paths.
    """
    condensed_trace = []
    frames = traceback.extract_tb(exc.__traceback__)

    for frame in frames:
        filename = os.path.basename(frame.filename)
        condensed_trace.append(
            f'{filename}:{frame.lineno} in {frame.name}'
        )
    return "\n".join(condensed_trace)
