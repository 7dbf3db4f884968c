"""
Diabetes Risk Admin API
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the diabetes_api package.
Set APP_CONFIG=production to sign tokens and turn off the demo logins.
"""

import logging
import os

from diabetes_api import create_app
from diabetes_api.config import config_from_env

config_class = config_from_env()

logging.basicConfig(
    level=config_class.LOG_LEVEL.upper(),
    format='[%(asctime)s] %(levelname)s %(name)s: %(message)s',
)

# Create the Flask application using the factory
app = create_app(config_class)

if __name__ == '__main__':
    app.run(debug=config_class.EXPOSE_STACK, host='0.0.0.0', port=int(os.environ.get('PORT', 8000)))
