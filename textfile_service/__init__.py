from .file_service import create_app

__all__ = ["create_app"]
