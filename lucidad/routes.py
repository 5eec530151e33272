import azure.functions as func
import logging

from schemas.factcheck.v1 import FactCheckResult
from lucidad.transforms.analyzer import Analyzer
from lucidad.utils.app_utils import http_wrap
from lucidad.utils.log_utils import setup_logger

logger = setup_logger(__name__, logging.DEBUG)


def read_image(req: func.HttpRequest):
    """Pull the image field out of a JSON body. Anything unreadable is None."""
    try:
        body = req.get_json()
    except ValueError:
        logger.debug("Request body is not JSON")
        return None
    if not isinstance(body, dict):
        return None
    return body.get("image")


@http_wrap
def analyze(req: func.HttpRequest, analyzer: Analyzer) -> FactCheckResult:
    """Fact-check the advertisement image posted as {"image": "<data url>"}."""
    return analyzer.analyze(read_image(req))
