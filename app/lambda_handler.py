# =============================================================================
# app/lambda_handler.py - AWS Lambda Entry Point
# =============================================================================
# Wraps the ASGI app with Mangum so the Lambda runtime can call it.
# API Gateway (REST and HTTP APIs) and ALB events are translated to ASGI
# requests, and responses back to Lambda proxy responses.
#
# Container image CMD:
#   ["app.lambda_handler.handler"]
# =============================================================================

from mangum import Mangum

from app.config import settings
from app.main import app

handler = Mangum(
    app,
    lifespan=settings.LAMBDA_LIFESPAN,
    api_gateway_base_path=settings.API_GATEWAY_BASE_PATH,
)
