import logging
import azure.functions as func
from lucidad.container import ServiceContainer
from lucidad.utils.app_utils import load_env_vars
from lucidad.utils.log_utils import setup_logger, quiet_sdk_loggers

load_env_vars()

app = func.FunctionApp()

logger = setup_logger(__name__, logging.DEBUG)
quiet_sdk_loggers()

container = ServiceContainer.create_real()


@app.route(route="analyze", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
def analyze(req: func.HttpRequest) -> func.HttpResponse:
    """Fact-check an advertisement image sent as a data URL."""
    from lucidad.routes import analyze as analyze_route
    return analyze_route(req, container.analyzer)
