class LowercasePathMiddleware:
    """
    WSGI middleware that lowercases ``PATH_INFO`` before routing, so
    ``/TextFile-API/All`` reaches the same view as ``/textfile-api/all``.

    The query string is left alone; file names stay case-sensitive.
    """

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        environ["PATH_INFO"] = environ.get("PATH_INFO", "").lower()
        return self.app(environ, start_response)
