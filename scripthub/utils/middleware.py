"""
WSGI middleware
"""

import logging
from urllib.parse import parse_qs

logger = logging.getLogger(__name__)


class MethodOverrideMiddleware:
    """Let HTML forms send PUT/PATCH/DELETE as POST with ?_method=<verb>"""

    allowed_methods = frozenset(['PUT', 'PATCH', 'DELETE'])
    bodyless_methods = frozenset(['DELETE'])

    def __init__(self, app, param='_method'):
        self.app = app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            method = (query.get(self.param) or [''])[0].upper()
            if method in self.allowed_methods:
                logger.debug(f"Method override POST -> {method} for {environ.get('PATH_INFO')}")
                environ['REQUEST_METHOD'] = method
                if method in self.bodyless_methods:
                    environ['CONTENT_LENGTH'] = '0'
        return self.app(environ, start_response)
