"""
Professional directory service module.
"""

from .service import ProfessionalService
from .category import CategoryResolver, CATEGORY_TYPE_IDS

__all__ = ["ProfessionalService", "CategoryResolver", "CATEGORY_TYPE_IDS"]
