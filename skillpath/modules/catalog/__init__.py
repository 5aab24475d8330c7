"""Catalog Module - courses, learning paths, projects, progress and the storage contract.

Usage:
    from skillpath.modules.catalog.storage import InMemoryStorage
    from skillpath.modules.catalog.service import CatalogService

    service = CatalogService(InMemoryStorage.with_sample_data())
"""
