# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web application:
# - main.py: App factory, middleware setup, error handlers, local runner
# - config.py: Environment variable loading and settings
# - exceptions.py: Structured error responses
# - lambda_handler.py: Mangum wrapper invoked by AWS Lambda
# - routers/: API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# to the core/ package.
# =============================================================================
