"""Infrastructure layer — packaged resources and template loading.

Depends on domain. Must never import from services or output.
"""
