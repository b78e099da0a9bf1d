"""
Service layer.

``wonder_store`` owns the validated dataset; ``wonder_service`` holds
the filtering, sorting and selection logic run on every request.
"""
