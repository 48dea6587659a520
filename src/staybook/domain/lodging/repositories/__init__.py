from staybook.domain.lodging.repositories.lodging_repository import LodgingRepository

__all__ = ["LodgingRepository"]
