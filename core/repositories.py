"""
Repository pattern implementation.
Abstracts data access and provides a clean interface for domain services.
"""
from typing import Generic, TypeVar, Optional
from django.db.models import Model

from core.exceptions import NotFoundError

T = TypeVar('T', bound=Model)


class BaseRepository(Generic[T]):
    """
    Base repository providing the plain create/update operations.
    Follows Repository pattern for data access abstraction.
    """

    def __init__(self, model: type[T]):
        self.model = model

    def get_by_id(self, id: int, **filters) -> Optional[T]:
        """Get a single instance by ID"""
        return self.model.objects.filter(id=id, **filters).first()

    def get_by_id_or_raise(self, id: int, **filters) -> T:
        """Get a single instance by ID or raise NotFoundError"""
        instance = self.get_by_id(id, **filters)
        if instance is None:
            raise NotFoundError(resource_type=self.model.__name__, resource_id=id)
        return instance

    def create(self, **kwargs) -> T:
        """Create a new instance"""
        return self.model.objects.create(**kwargs)

    def update(self, id: int, **kwargs) -> T:
        """Update an existing instance by ID"""
        instance = self.get_by_id_or_raise(id)
        for key, value in kwargs.items():
            setattr(instance, key, value)
        instance.save()
        return instance
