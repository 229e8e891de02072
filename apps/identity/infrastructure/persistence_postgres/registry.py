"""SQLAlchemy mapper registry for identity schema."""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

metadata = MetaData(schema="identity")
mapper_registry = registry(metadata=metadata)
