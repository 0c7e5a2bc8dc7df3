#!/usr/bin/env python3
"""
Run script for the Procurement Portal API
"""

import argparse
import os
import sys
from dotenv import load_dotenv

# Load environment variables from .env file before the app reads them
load_dotenv()

from procurement_portal import create_app
from procurement_portal.build import build_database
from procurement_portal.logger import get_logger

# Run 'python generate_env.py' to create .env with a secret key and admin password.

app = create_app()
logger = get_logger("procurement_portal.run")


def parse_arguments():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Procurement Portal API')
    parser.add_argument('--build-only', action='store_true',
                        help='Build database tables and critical data only, do not start the server')
    parser.add_argument('--enable-debug-data', action='store_true', default=True,
                        help='Insert sample brands, parts, suppliers and orders (default)')
    parser.add_argument('--no-debug-data', action='store_false', dest='enable_debug_data',
                        help='Disable debug data insertion')
    return parser.parse_args()


if __name__ == '__main__':
    args = parse_arguments()

    with app.app_context():
        # Critical data is always checked and inserted
        build_database(enable_debug_data=args.enable_debug_data and not args.build_only)

    if args.build_only:
        logger.debug("Build completed. Exiting without starting web server.")
        sys.exit(0)

    debug_mode = os.environ.get('FLASK_DEBUG', 'False').lower() in ('true', '1', 'yes', 'on')
    use_reloader = os.environ.get('USE_RELOADER', 'False').lower() in ('true', '1', 'yes', 'on')
    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', '5000'))

    if debug_mode:
        logger.warning("DEBUG MODE ENABLED - Do not use in production!")

    logger.info(f"Starting server on {host}:{port} (debug={debug_mode}, reloader={use_reloader})")
    app.run(debug=debug_mode, host=host, port=port, use_reloader=use_reloader)
