"""
Infrastructure layer.

Adapters between the domain model and the outside world. For skills this
is the persisted dict shape: pydantic schemas validate it at the boundary
and factories turn validated data into domain objects.
"""
