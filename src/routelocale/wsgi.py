"""WSGI entrypoint for deploying the localized routing service."""

from routelocale.app import create_app

# Passenger and most WSGI servers expect a module-level ``application``.
application = create_app()
