#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Main entry point for the ScriptHub site

This script builds the Flask application and starts the development server.
`flask --app run <command>` picks up the `app` defined here as well.
"""

import logging

from scripthub import create_app

logger = logging.getLogger(__name__)

app = create_app()


def main():
    """Main entry point"""
    host = app.config['HOST']
    port = int(app.config['PORT'])
    logger.info(f"Server listening on http://{host}:{port}")
    app.run(host=host, port=port, debug=False)


if __name__ == '__main__':
    main()
