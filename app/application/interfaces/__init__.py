"""Application interfaces (ports): gateway protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.gateways import ICategoryGateway, IGenreGateway

__all__ = [
    "ICategoryGateway",
    "IGenreGateway",
]
