"""Service layer — engine operations returning ServiceResult.

Services may import from domain, config, infrastructure and output.
Domain code must never import from services.
"""
