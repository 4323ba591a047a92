"""
Metadata Translation

Components:
    - provider_params: Per-engine credential parameters and request spacing
    - gate: Process-wide lock serializing all translation requests
    - retry_manager: Bounded immediate retry around each request
    - translator: Field-by-field translation of movie and actor records
"""

__all__ = []
