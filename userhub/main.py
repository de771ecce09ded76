"""Main application entry point for the FastAPI application.

This module initializes the application and creates the FastAPI instance
using the application factory pattern. Serve it with ``uvicorn userhub.main:app``
or ``python -m userhub``.
"""

from userhub.core.application import create_application
from userhub.core.config.settings import settings
from userhub.core.initialization import initialize_application

# Initialize the application
initialize_application(settings)

# Create the FastAPI application
app = create_application(settings)
