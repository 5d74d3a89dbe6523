"""Wire DTOs (camelCase JSON shapes) and their tolerant `to_domain()` mappers."""
