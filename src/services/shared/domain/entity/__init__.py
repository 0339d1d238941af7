from .aggregate import AggregateRoot as AggregateRoot
from .aggregate import DomainEvent as DomainEvent
from .aggregate import Entity as Entity
